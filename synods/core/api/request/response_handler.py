"""Response handler for API responses."""
import json
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar, Union

from ..errors import SynoAPIError, SynoDecodeError, SynoTransportError

T = TypeVar('T')

_MISSING = object()


@dataclass(frozen=True)
class HttpResponse:
    """Raw response returned by the transport."""
    status: int
    body: bytes


@dataclass(frozen=True)
class Envelope:
    """
    The uniform ``{success, data | error}`` wrapper.

    Exactly one of ``data``/``error`` is set, matching ``success``.
    """
    success: bool
    data: Any = None
    error_code: Optional[int] = None
    errors: Any = None


class ResponseHandler:
    """Handles API responses."""

    @staticmethod
    def check_status(response: HttpResponse) -> None:
        """Raises for non-2xx HTTP statuses."""
        if not 200 <= response.status < 300:
            raise SynoTransportError(
                f"HTTP request failed with status: {response.status}",
                status=response.status
            )

    @staticmethod
    def parse_envelope(body: Union[bytes, str]) -> Envelope:
        """
        Parses and validates the response envelope.

        Raises:
            SynoDecodeError: If the body is not a well-formed envelope
        """
        try:
            payload = json.loads(body)
        except (TypeError, ValueError) as e:
            raise SynoDecodeError(f"Invalid JSON response: {e}", body) from e

        if not isinstance(payload, dict):
            raise SynoDecodeError("Response is not a JSON object", body)

        success = payload.get('success')
        if not isinstance(success, bool):
            raise SynoDecodeError("Response has no boolean 'success' field", body)

        data = payload.get('data', _MISSING)
        error = payload.get('error', _MISSING)

        if success:
            if data is _MISSING or error is not _MISSING:
                raise SynoDecodeError("Successful response must carry 'data' only", body)
            return Envelope(success=True, data=data)

        if error is _MISSING or data is not _MISSING:
            raise SynoDecodeError("Failed response must carry 'error' only", body)
        if not isinstance(error, dict):
            raise SynoDecodeError("'error' is not an object", body)
        code = error.get('code')
        if isinstance(code, bool) or not isinstance(code, int):
            raise SynoDecodeError("'error.code' is missing or not an integer", body)
        return Envelope(success=False, error_code=code, errors=error.get('errors'))

    @staticmethod
    def process_response(
        envelope: Envelope,
        parser: Optional[Callable[[Any], T]] = None,
        api: Optional[str] = None
    ) -> T:
        """
        Turns an envelope into the payload or an API error.

        Raises:
            SynoAPIError: If the server reported a failure
            SynoDecodeError: If the payload does not fit the parser
        """
        if not envelope.success:
            raise SynoAPIError(envelope.error_code, envelope.errors, api=api)

        if parser is None:
            return envelope.data

        try:
            return parser(envelope.data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise SynoDecodeError(
                f"Unexpected payload shape: {e!r}", envelope.data
            ) from e

    @classmethod
    def decode(
        cls,
        body: Union[bytes, str],
        parser: Optional[Callable[[Any], T]] = None,
        api: Optional[str] = None
    ) -> T:
        """Parses the envelope and returns the payload."""
        return cls.process_response(cls.parse_envelope(body), parser, api)
