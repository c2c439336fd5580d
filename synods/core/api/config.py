"""
Client configuration.

Holds the NAS address, the credentials used for every login, connection
settings and the re-login policy.
"""
import os
import ssl
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

import aiohttp

from .errors import SESSION_EXPIRED_CODE, ConfigurationError


API_PATH = '/webapi/entry.cgi'


@dataclass
class ProxyConfig:
    """HTTP proxy between the client and the NAS."""
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    def to_request_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``ClientSession.post``."""
        if not self.url:
            return {}
        kwargs: Dict[str, Any] = {'proxy': self.url}
        if self.username:
            kwargs['proxy_headers'] = {
                'Proxy-Authorization': aiohttp.encode_basic_auth(self.username, self.password or '')
            }
        return kwargs


@dataclass
class SSLConfig:
    """
    TLS settings.

    Self-signed NAS certificates can be trusted through ``ca_file``, pinned
    through ``fingerprint`` (SHA-256 of the DER certificate) or accepted
    blindly with ``verify=False``.
    """
    verify: bool = True
    ca_file: Optional[str] = None
    check_hostname: bool = True
    fingerprint: Optional[bytes] = None

    def to_connector_ssl(self) -> Union[bool, ssl.SSLContext, aiohttp.Fingerprint]:
        """Value for the ``ssl`` argument of ``TCPConnector``."""
        if self.fingerprint is not None:
            return aiohttp.Fingerprint(self.fingerprint)
        if not self.verify:
            return False
        context = ssl.create_default_context(cafile=self.ca_file)
        context.check_hostname = self.check_hostname
        return context


@dataclass
class TimeoutConfig:
    """
    Request timeouts in seconds.

    ``total`` bounds a whole request; the others are optional.
    """
    total: float = 3.0
    connect: Optional[float] = None
    sock_read: Optional[float] = None

    def to_client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(total=self.total, connect=self.connect, sock_read=self.sock_read)


@dataclass
class RetryConfig:
    """
    Re-login configuration.

    A call failing with one of ``relogin_on_codes`` triggers exactly one
    re-login and replay.
    """
    relogin_on_codes: Tuple[int, ...] = (SESSION_EXPIRED_CODE,)


@dataclass
class SynoConfig:
    """
    Complete client configuration.

    Holds the NAS address and the credentials used for the initial login
    and for every re-login after a session expires.
    """
    host: str
    username: str
    password: str = field(repr=False)

    # Auth session name sent with login
    session_name: str = 'DownloadStation'

    user_agent: str = 'synods/0.2.0'

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)

    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Level for every synods logger; None leaves logging configuration alone
    log_level: Optional[int] = None

    # Connection pool settings
    limit_per_host: int = 4
    limit: int = 16

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Validate required settings and normalise the host.

        Raises:
            ConfigurationError: If a required value is missing or malformed
        """
        if not self.username:
            raise ConfigurationError("Username cannot be empty")
        if not self.password:
            raise ConfigurationError("Password cannot be empty")
        if not self.host:
            raise ConfigurationError("Host URL cannot be empty")
        if not self.host.startswith(('http://', 'https://')):
            raise ConfigurationError(
                f"Host URL must start with http:// or https://, got: {self.host}"
            )
        self.host = self.host.rstrip('/')

    @property
    def api_url(self) -> str:
        """Full URL of the API entry point."""
        return f"{self.host}{API_PATH}"

    @classmethod
    def from_env(cls, **kwargs) -> 'SynoConfig':
        """
        Create configuration from SYNOLOGY_HOST, SYNOLOGY_USERNAME and
        SYNOLOGY_PASSWORD.
        """
        values = {}
        for key, var in (('host', 'SYNOLOGY_HOST'),
                         ('username', 'SYNOLOGY_USERNAME'),
                         ('password', 'SYNOLOGY_PASSWORD')):
            value = os.environ.get(var)
            if value is None:
                raise ConfigurationError(f"Environment variable {var} is not set")
            values[key] = value
        values.update(kwargs)
        return cls(**values)

    @classmethod
    def insecure(cls, host: str, username: str, password: str, **kwargs) -> 'SynoConfig':
        """Configuration for a NAS with a self-signed certificate nobody pinned."""
        kwargs['ssl'] = SSLConfig(verify=False, check_hostname=False)
        return cls(host=host, username=username, password=password, **kwargs)

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``aiohttp.TCPConnector``."""
        return dict(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ssl=self.ssl.to_connector_ssl(),
        )

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``aiohttp.ClientSession``."""
        headers = dict(self.extra_headers)
        headers.setdefault('User-Agent', self.user_agent)
        return dict(headers=headers, timeout=self.timeout.to_client_timeout())

    def get_request_kwargs(self) -> Dict[str, Any]:
        """Per-request keyword arguments for ``ClientSession.post``."""
        return self.proxy.to_request_kwargs() if self.proxy else {}
