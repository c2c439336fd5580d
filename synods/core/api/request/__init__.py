"""Request handling using Strategy and Template Method patterns."""
from .request_builder import ApiRequest, FilePart, PreparedRequest, RequestBuilder, encode_value, quote
from .response_handler import Envelope, HttpResponse, ResponseHandler
from .request_handler import RequestHandler

__all__ = [
    'ApiRequest',
    'Envelope',
    'FilePart',
    'HttpResponse',
    'PreparedRequest',
    'RequestBuilder',
    'RequestHandler',
    'ResponseHandler',
    'encode_value',
    'quote',
]
