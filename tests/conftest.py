"""Pytest fixtures for synods tests."""
import json
from typing import Any, Dict, List, Optional, Union

import pytest

from synods.core.api import RequestBuilder, RequestHandler, SessionManager, SynoConfig
from synods.core.api.request import HttpResponse, PreparedRequest
from synods.core.tasks import TaskService


class FakeTransport:
    """
    Scripted transport.

    Responses are consumed in order; every sent request is recorded.
    """

    def __init__(self):
        self.responses: List[Union[HttpResponse, BaseException]] = []
        self.requests: List[PreparedRequest] = []
        self.closed = False

    def queue_raw(self, body: Union[bytes, str], status: int = 200) -> 'FakeTransport':
        if isinstance(body, str):
            body = body.encode()
        self.responses.append(HttpResponse(status=status, body=body))
        return self

    def queue_ok(self, data: Any = None) -> 'FakeTransport':
        return self.queue_raw(json.dumps({'success': True, 'data': data}))

    def queue_error(self, code: int, errors: Any = None) -> 'FakeTransport':
        error: Dict[str, Any] = {'code': code}
        if errors is not None:
            error['errors'] = errors
        return self.queue_raw(json.dumps({'success': False, 'error': error}))

    def queue_login(self, sid: str = '456') -> 'FakeTransport':
        return self.queue_ok({'account': 'test', 'sid': sid, 'synotoken': ''})

    def queue_exception(self, exc: BaseException) -> 'FakeTransport':
        self.responses.append(exc)
        return self

    async def send(self, request: PreparedRequest) -> HttpResponse:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.fields}")
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self) -> None:
        self.closed = True

    def fields(self, index: int = -1) -> Dict[str, str]:
        """Form fields of a recorded request as a dict."""
        return dict(self.requests[index].fields)

    def sid(self, index: int = -1) -> Optional[str]:
        request = self.requests[index]
        return request.query.get('_sid') or dict(request.fields).get('_sid')

    @property
    def methods(self) -> List[str]:
        return [dict(r.fields)['method'] for r in self.requests]


@pytest.fixture
def config():
    """Client configuration pointing at a fake NAS."""
    return SynoConfig(host='http://nas.local:5000', username='test', password='test123')


@pytest.fixture
def transport():
    """Scripted fake transport."""
    return FakeTransport()


@pytest.fixture
def builder(config):
    return RequestBuilder(config.api_url)


@pytest.fixture
def session_manager(config, transport, builder):
    return SessionManager(config, transport, builder)


@pytest.fixture
def handler(transport, session_manager, builder):
    return RequestHandler(transport, session_manager, builder)


@pytest.fixture
def service(handler):
    return TaskService(handler)


@pytest.fixture
def sample_task_data():
    """Returns a downloading task as sent by the API."""
    return {
        'id': 'task_id_1',
        'username': 'Bob',
        'type': 'bt',
        'title': 'Ubuntu 16.04',
        'size': 1_234_567_890,
        'status': 2,
        'status_extra': None,
        'additional': {
            'transfer': {
                'downloaded_pieces': 10,
                'size_downloaded': 0,
                'size_uploaded': 0,
                'speed_download': 98765,
                'speed_upload': 0,
            },
        },
    }


@pytest.fixture
def sample_detailed_task_data(sample_task_data):
    """Returns a task with every additional section filled in."""
    data = dict(sample_task_data)
    data['additional'] = {
        'detail': {
            'completed_time': 0,
            'connected_leechers': 0,
            'connected_peers': 1,
            'connected_seeders': 1,
            'created_time': 1699900000,
            'destination': 'downloads',
            'seed_elapsed': 0,
            'started_time': 1699900100,
            'total_peers': 12,
            'total_pieces': 2048,
            'uri': 'magnet:?xt=urn:btih:abc',
            'unzip_password': None,
            'waiting_seconds': 0,
        },
        'file': [{
            'filename': 'test_file_1.mp4',
            'index': 0,
            'priority': 'normal',
            'size': 1_073_741_824,
            'size_downloaded': 536_870_912,
            'wanted': True,
        }],
        'peer': [{
            'address': '192.168.1.100:12345',
            'agent': 'uTorrent/3.5.5',
            'progress': 0.5,
            'speed_download': 1000,
            'speed_upload': 200,
        }],
        'tracker': [{
            'peers': 10,
            'seeds': 5,
            'status': 'Success',
            'update_timer': 1800,
            'url': 'udp://tracker.example.com:80/announce',
        }],
        'transfer': {
            'downloaded_pieces': 1024,
            'size_downloaded': 617_283_945,
            'size_uploaded': 1000,
            'speed_download': 98765,
            'speed_upload': 200,
        },
    }
    return data
