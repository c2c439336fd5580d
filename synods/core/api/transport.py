"""
HTTP transport for the Synology Web API.

Sends prepared requests as url-encoded or multipart POST bodies and
returns the raw status and body. Network failures are translated into
SynoTransportError; nothing is retried here.
"""
import asyncio
from typing import Optional, Protocol, runtime_checkable
from urllib.parse import urlencode

import aiohttp

from .config import SynoConfig
from .errors import SynoTransportError
from .request.request_builder import PreparedRequest
from .request.response_handler import HttpResponse
from .session.session_factory import SessionFactory
from ..logging import get_logger, mask_sid


@runtime_checkable
class Transport(Protocol):
    """Protocol for anything able to deliver a prepared request."""

    async def send(self, request: PreparedRequest) -> HttpResponse:
        """
        Send the request and return status and body.

        Raises:
            SynoTransportError: On network, TLS or timeout failures
        """
        ...

    async def close(self) -> None:
        """Release connections."""
        ...


class AiohttpTransport:
    """
    aiohttp based transport.

    The ClientSession is created lazily and reused for connection pooling.
    A session passed in by the caller is left open on close().

    Example:
        >>> transport = AiohttpTransport(config)
        >>> response = await transport.send(prepared)
    """

    def __init__(
        self,
        config: SynoConfig,
        session: Optional[aiohttp.ClientSession] = None
    ):
        self._config = config
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger('synods.transport')

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._session = await SessionFactory.create_async_session(self._config)
            self._owns_session = True
        return self._session

    @staticmethod
    def build_form(request: PreparedRequest) -> aiohttp.FormData:
        """Build a url-encoded form, or a multipart one when files are attached."""
        form = aiohttp.FormData()
        for name, value in request.fields:
            form.add_field(name, value)
        for part in request.files:
            form.add_field(
                part.name,
                part.data,
                filename=part.filename,
                content_type=part.content_type
            )
        return form

    async def send(self, request: PreparedRequest) -> HttpResponse:
        session = await self._ensure_session()
        form = self.build_form(request)

        target = request.url
        if request.query:
            target = f"{target}?{urlencode(request.query)}"
        self._logger.debug(
            "POST %s (%s, %d fields)",
            mask_sid(target),
            'multipart' if request.is_multipart else 'form',
            len(request.fields)
        )

        try:
            async with session.post(
                request.url,
                data=form,
                params=request.query or None,
                **self._config.get_request_kwargs()
            ) as response:
                body = await response.read()
                self._logger.debug("API request status: %s", response.status)
                return HttpResponse(status=response.status, body=body)
        except asyncio.TimeoutError as e:
            raise SynoTransportError("Request timed out") from e
        except aiohttp.ClientError as e:
            raise SynoTransportError(f"Network error: {e}") from e

    async def close(self) -> None:
        """Close the HTTP session if this transport created it."""
        if self._session and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None
