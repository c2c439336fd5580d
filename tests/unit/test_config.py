"""Tests for client configuration."""
import ssl
import warnings

import aiohttp
import pytest

from synods.core.api import SESSION_EXPIRED_CODE, ProxyConfig, SSLConfig, SynoConfig, TimeoutConfig
from synods.core.api.errors import ConfigurationError


class TestSynoConfig:
    """Test suite for SynoConfig."""

    def test_defaults(self, config):
        """Test default values."""
        assert config.session_name == 'DownloadStation'
        assert config.timeout.total == 3.0
        assert config.retry.relogin_on_codes == (SESSION_EXPIRED_CODE,)
        assert config.ssl.verify is True

    def test_api_url(self, config):
        assert config.api_url == 'http://nas.local:5000/webapi/entry.cgi'

    def test_trailing_slash_stripped(self):
        """Test a trailing slash does not double up in the API URL."""
        config = SynoConfig('https://nas:5001/', 'admin', 'pw')

        assert config.api_url == 'https://nas:5001/webapi/entry.cgi'

    @pytest.mark.parametrize('host,username,password', [
        ('', 'admin', 'pw'),
        ('nas:5000', 'admin', 'pw'),
        ('http://nas:5000', '', 'pw'),
        ('http://nas:5000', 'admin', ''),
    ])
    def test_invalid_values(self, host, username, password):
        """Test missing or malformed values are rejected."""
        with pytest.raises(ConfigurationError):
            SynoConfig(host, username, password)

    def test_password_not_in_repr(self, config):
        assert 'test123' not in repr(config)

    def test_from_env(self, monkeypatch):
        """Test configuration from environment variables."""
        monkeypatch.setenv('SYNOLOGY_HOST', 'http://nas:5000')
        monkeypatch.setenv('SYNOLOGY_USERNAME', 'admin')
        monkeypatch.setenv('SYNOLOGY_PASSWORD', 'pw')

        config = SynoConfig.from_env(session_name='Custom')

        assert config.host == 'http://nas:5000'
        assert config.username == 'admin'
        assert config.password == 'pw'
        assert config.session_name == 'Custom'

    def test_from_env_missing(self, monkeypatch):
        """Test a missing variable is reported by name."""
        monkeypatch.setenv('SYNOLOGY_HOST', 'http://nas:5000')
        monkeypatch.setenv('SYNOLOGY_USERNAME', 'admin')
        monkeypatch.delenv('SYNOLOGY_PASSWORD', raising=False)

        with pytest.raises(ConfigurationError, match='SYNOLOGY_PASSWORD'):
            SynoConfig.from_env()

    def test_insecure(self):
        """Test insecure configuration disables certificate checks."""
        config = SynoConfig.insecure('https://nas:5001', 'admin', 'pw')

        assert config.ssl.verify is False
        assert config.get_connector_kwargs()['ssl'] is False

    def test_connector_kwargs(self, config):
        kwargs = config.get_connector_kwargs()

        assert kwargs['limit'] == 16
        assert kwargs['limit_per_host'] == 4

    def test_session_kwargs(self):
        """Test headers and timeout are passed to the session."""
        config = SynoConfig(
            'http://nas:5000', 'admin', 'pw',
            timeout=TimeoutConfig(total=10.0),
            extra_headers={'X-Test': '1'}
        )

        kwargs = config.get_session_kwargs()

        assert kwargs['headers']['User-Agent'] == 'synods/0.2.0'
        assert kwargs['headers']['X-Test'] == '1'
        assert isinstance(kwargs['timeout'], aiohttp.ClientTimeout)
        assert kwargs['timeout'].total == 10.0


class TestProxyConfig:
    """Test suite for ProxyConfig."""

    def test_no_url(self):
        assert ProxyConfig().to_request_kwargs() == {}

    def test_credentials(self):
        """Test credentials travel as a Proxy-Authorization header."""
        proxy = ProxyConfig(url='http://proxy:8080', username='u', password='p')

        with warnings.catch_warnings():
            warnings.simplefilter('error', DeprecationWarning)
            kwargs = proxy.to_request_kwargs()

        assert kwargs['proxy'] == 'http://proxy:8080'
        assert kwargs['proxy_headers'] == {'Proxy-Authorization': 'Basic dTpw'}
        assert 'proxy_auth' not in kwargs

    def test_config_request_kwargs(self):
        config = SynoConfig('http://nas:5000', 'admin', 'pw', proxy=ProxyConfig(url='http://proxy:8080'))

        assert config.get_request_kwargs() == {'proxy': 'http://proxy:8080'}


class TestSSLConfig:
    """Test suite for SSLConfig."""

    def test_default_context(self):
        assert isinstance(SSLConfig().to_connector_ssl(), ssl.SSLContext)

    def test_fingerprint(self):
        """Test a pinned certificate wins over other settings."""
        pinned = SSLConfig(verify=False, fingerprint=b'\x00' * 32)

        assert isinstance(pinned.to_connector_ssl(), aiohttp.Fingerprint)
