"""Request handler using Template Method pattern."""
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from .request_builder import ApiRequest, RequestBuilder
from .response_handler import ResponseHandler
from ..errors import SynoAPIError
from ..retry import ReloginOnceStrategy, RetryState, RetryStrategy
from ...logging import get_logger

if TYPE_CHECKING:
    from ..session import SessionManager
    from ..transport import Transport

T = TypeVar('T')


class RequestHandler:
    """
    Executes logical API calls on behalf of an authenticated session.

    One logical call is: login if no token is held, send, decode. When the
    server rejects the session the retry strategy decides, from the error
    code and the call's RetryState, whether to log in again and replay.
    The default strategy allows one replay. Transport and decode failures
    are never retried.
    """

    def __init__(
        self,
        transport: 'Transport',
        session: 'SessionManager',
        builder: RequestBuilder,
        retry_strategy: Optional[RetryStrategy] = None
    ):
        """Initializes request handler."""
        self.transport = transport
        self.session = session
        self.builder = builder
        self.retry_strategy = retry_strategy or ReloginOnceStrategy()
        self.logger = get_logger('synods.request')

    async def _attempt(self, request: ApiRequest, parser: Optional[Callable[[Any], T]]) -> T:
        """Sends the request once with the token held right now."""
        prepared = self.builder.build(request, self.session.current_token)
        response = await self.transport.send(prepared)
        ResponseHandler.check_status(response)
        return ResponseHandler.decode(response.body, parser, api=request.api)

    async def execute(
        self,
        request: ApiRequest,
        parser: Optional[Callable[[Any], T]] = None
    ) -> T:
        """
        Executes one logical call.

        Args:
            request: Call description, independent of the session token
            parser: Builds the payload type from the envelope's data

        Returns:
            The parsed payload

        Raises:
            SynoAuthError: If a login or re-login fails
            SynoAPIError: If the server rejects the call
            SynoTransportError: On network failures
            SynoDecodeError: On malformed responses
        """
        if not self.session.is_authenticated:
            await self.session.login()

        state = RetryState.NOT_ATTEMPTED
        while True:
            try:
                return await self._attempt(request, parser)
            except SynoAPIError as e:
                if not self.retry_strategy.should_relogin(e.code, state):
                    raise
                self.logger.info(
                    "Session rejected (code %s) on %s.%s, logging in again",
                    e.code, request.api, request.method
                )

            await self.session.login()
            state = RetryState.AFTER_RETRY
            self.logger.debug("Replaying %s.%s", request.api, request.method)
