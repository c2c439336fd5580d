"""Request builder for API requests."""
import json
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

ParamValue = Union[str, int, bool, Sequence[str]]


@dataclass(frozen=True)
class FilePart:
    """A file embedded in a multipart request."""
    name: str
    filename: str
    data: bytes = field(repr=False)
    content_type: str = 'application/octet-stream'


@dataclass(frozen=True)
class ApiRequest:
    """
    Description of one logical API call.

    The template does not know about the session token; it is attached
    when the request is built for sending.

    Attributes:
        api: API namespace, e.g. ``SYNO.DownloadStation2.Task``
        version: API version
        method: Method name
        params: Extra parameters (str, int, bool or list of str)
        files: Files to upload; forces a multipart body
    """
    api: str
    version: int
    method: str
    params: Mapping[str, ParamValue] = field(default_factory=dict)
    files: Tuple[FilePart, ...] = ()


@dataclass(frozen=True)
class PreparedRequest:
    """A request ready for the transport."""
    url: str
    fields: List[Tuple[str, str]]
    files: Tuple[FilePart, ...] = ()
    query: Dict[str, str] = field(default_factory=dict)

    @property
    def is_multipart(self) -> bool:
        return bool(self.files)


def encode_value(value: ParamValue) -> str:
    """
    Encode a parameter value the way the Web API expects it.

    Booleans become ``true``/``false``, lists become compact JSON arrays.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value), separators=(',', ':'), ensure_ascii=False)
    raise TypeError(f"Unsupported parameter type: {type(value).__name__}")


def quote(value: str) -> str:
    """JSON-quote a string parameter (``url`` -> ``"url"``)."""
    return json.dumps(value, ensure_ascii=False)


class RequestBuilder:
    """Builds API requests."""

    def __init__(self, api_url: str):
        """Initializes request builder."""
        self.api_url = api_url

    def build_fields(self, request: ApiRequest) -> List[Tuple[str, str]]:
        """Builds the ordered list of form fields."""
        fields = [
            ('api', request.api),
            ('version', str(request.version)),
            ('method', request.method),
        ]
        for name, value in request.params.items():
            fields.append((name, encode_value(value)))
        return fields

    def build(self, request: ApiRequest, session_id: Optional[str] = None) -> PreparedRequest:
        """
        Builds the wire request.

        The session id travels as a form field in url-encoded bodies and
        in the query string for multipart uploads.
        """
        fields = self.build_fields(request)
        query: Dict[str, str] = {}
        if session_id:
            if request.files:
                query['_sid'] = session_id
            else:
                fields.append(('_sid', session_id))
        return PreparedRequest(
            url=self.api_url,
            fields=fields,
            files=tuple(request.files),
            query=query
        )
