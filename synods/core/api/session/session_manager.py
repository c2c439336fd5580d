"""
Authentication session management.

Holds the session token and performs the login handshake against
SYNO.API.Auth.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..config import SynoConfig
from ..errors import SynoAPIError, SynoAuthError, SynoError
from ..request.request_builder import ApiRequest, RequestBuilder
from ..request.response_handler import ResponseHandler
from ...logging import get_logger

if TYPE_CHECKING:
    from ..transport import Transport


AUTH_API = 'SYNO.API.Auth'
AUTH_VERSION = 7


@dataclass(frozen=True)
class AuthData:
    """Login response payload."""
    sid: str
    account: str = ''
    device_id: str = ''
    ik_message: str = ''
    synotoken: str = ''
    is_portal_port: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AuthData':
        sid = data['sid']
        if not isinstance(sid, str) or not sid:
            raise ValueError("Login response carries no session id")
        return cls(
            sid=sid,
            account=data.get('account', ''),
            device_id=data.get('device_id', ''),
            ik_message=data.get('ik_message', ''),
            synotoken=data.get('synotoken', ''),
            is_portal_port=data.get('is_portal_port', False),
        )


class SessionManager:
    """
    Owns the session token for one client.

    The token is replaced in a single assignment once a login has fully
    succeeded, so a failed or cancelled login leaves the previous token
    in place. Expiry is only discovered when a call is rejected.
    """

    def __init__(
        self,
        config: SynoConfig,
        transport: 'Transport',
        builder: Optional[RequestBuilder] = None
    ):
        """
        Initialize session manager.

        Args:
            config: Client configuration holding the credentials
            transport: Transport used for the login call
            builder: Request builder (defaults to one for config.api_url)
        """
        self._config = config
        self._transport = transport
        self._builder = builder or RequestBuilder(config.api_url)
        self._token: Optional[str] = None
        self._logger = get_logger('synods.session')

    @property
    def is_authenticated(self) -> bool:
        """Whether a token is held. The server may still reject it."""
        return self._token is not None

    @property
    def current_token(self) -> Optional[str]:
        """Token to attach to outgoing requests."""
        return self._token

    def build_login_request(self) -> ApiRequest:
        """Builds the login call; it never carries a session id."""
        return ApiRequest(
            api=AUTH_API,
            version=AUTH_VERSION,
            method='login',
            params={
                'account': self._config.username,
                'passwd': self._config.password,
                'session': self._config.session_name,
                'format': 'sid',
            }
        )

    async def login(self) -> AuthData:
        """
        Login and store the new session token.

        Returns:
            AuthData from the server

        Raises:
            SynoAuthError: If the login fails for any reason
        """
        prepared = self._builder.build(self.build_login_request())
        self._logger.debug("Logging in as %s", self._config.username)

        try:
            response = await self._transport.send(prepared)
            ResponseHandler.check_status(response)
            auth = ResponseHandler.decode(response.body, AuthData.from_dict, api=AUTH_API)
        except SynoAPIError as e:
            raise SynoAuthError(f"Login rejected: {e.message}", e.code) from e
        except SynoError as e:
            raise SynoAuthError(f"Login failed: {e}") from e

        self._token = auth.sid
        self._logger.debug("Logged in as %s", self._config.username)
        return auth
