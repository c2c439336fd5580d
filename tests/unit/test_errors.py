"""Tests for error codes and exceptions."""
import pytest

from synods.core.api.errors import (
    SESSION_EXPIRED_CODE,
    APIErrorCodes,
    ConfigurationError,
    SynoAPIError,
    SynoAuthError,
    SynoDecodeError,
    SynoError,
    SynoTransportError,
)


class TestAPIErrorCodes:
    """Test suite for APIErrorCodes."""

    def test_common_code(self):
        assert APIErrorCodes.get_message(119) == 'Invalid or expired session, please relogin'

    def test_auth_namespace(self):
        """Test codes above 399 depend on the API namespace."""
        assert APIErrorCodes.get_message(400, 'SYNO.API.Auth') == 'No such account or incorrect password'
        assert APIErrorCodes.get_message(400, 'SYNO.DownloadStation2.Task') == 'File upload failed'

    def test_unknown_code(self):
        assert APIErrorCodes.get_message(9999) == 'Unknown error: 9999'


class TestSynoAPIError:
    """Test suite for SynoAPIError."""

    def test_attributes(self):
        """Test code, errors and message are kept."""
        error = SynoAPIError(403, errors=[{'id': 'x'}], api='SYNO.DownloadStation2.Task')

        assert error.code == 403
        assert error.error_code == 403
        assert error.errors == [{'id': 'x'}]
        assert error.message == 'Destination does not exist'
        assert '403' in str(error)

    def test_is_session_expired(self):
        assert SynoAPIError(SESSION_EXPIRED_CODE).is_session_expired is True
        assert SynoAPIError(106).is_session_expired is False


class TestHierarchy:
    """Test suite for the exception hierarchy."""

    @pytest.mark.parametrize('error', [
        ConfigurationError("bad"),
        SynoTransportError("down", 502),
        SynoDecodeError("garbled", b'<html>'),
        SynoAPIError(100),
        SynoAuthError("rejected", 400),
    ])
    def test_all_are_syno_errors(self, error):
        assert isinstance(error, SynoError)

    def test_transport_status(self):
        error = SynoTransportError("HTTP 502", status=502)

        assert error.status == 502

    def test_decode_body(self):
        error = SynoDecodeError("garbled", body=b'<html>')

        assert error.body == b'<html>'
