"""
DownloadStation - High-level async client for Synology Download Station.

Example:
    >>> async with DownloadStation("https://nas:5001", "admin", "secret") as ds:
    ...     tasks = await ds.list_tasks()
    ...     for task in tasks.task:
    ...         print(task.id, task.title, task.status)
"""
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from .core.api import (
    AiohttpTransport,
    AuthData,
    ReloginOnceStrategy,
    RequestBuilder,
    RequestHandler,
    SessionManager,
    SynoConfig,
    Transport,
)
from .core.api.request import ApiRequest
from .core.logging import set_level
from .core.tasks import (
    TaskCompleted,
    TaskCreated,
    TaskInfo,
    TaskList,
    TaskOperation,
    TaskService,
    TaskStatus,
)
from .core.tasks.service import DEFAULT_ADDITIONAL


class DownloadStation:
    """
    High-level async client for Download Station.

    The first call logs in on its own; calling login() up front is
    optional. An expired session is renewed transparently once per call.

    Supports two construction modes:

    1. Direct credentials:
        >>> ds = DownloadStation("http://nas:5000", "admin", "secret")

    2. Full configuration:
        >>> config = SynoConfig.insecure("https://nas:5001", "admin", "secret")
        >>> ds = DownloadStation(config=config)
    """

    def __init__(
        self,
        host: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        *,
        config: Optional[SynoConfig] = None,
        transport: Optional[Transport] = None
    ):
        """
        Initialize the client.

        Args:
            host: NAS URL, e.g. ``https://nas.local:5001``
            username: Account name
            password: Account password
            config: Complete configuration (overrides host/username/password)
            transport: Custom transport (defaults to aiohttp)
        """
        self._config = config or SynoConfig(
            host=host or '',
            username=username or '',
            password=password or ''
        )
        self._transport = transport or AiohttpTransport(self._config)
        builder = RequestBuilder(self._config.api_url)
        self._session = SessionManager(self._config, self._transport, builder)
        self._handler = RequestHandler(
            self._transport,
            self._session,
            builder,
            ReloginOnceStrategy(self._config.retry.relogin_on_codes)
        )
        self._tasks = TaskService(self._handler)

        if self._config.log_level is not None:
            set_level(self._config.log_level)

    @classmethod
    def from_env(cls, **kwargs) -> 'DownloadStation':
        """Create a client from SYNOLOGY_HOST, SYNOLOGY_USERNAME and SYNOLOGY_PASSWORD."""
        return cls(config=SynoConfig.from_env(**kwargs))

    @property
    def config(self) -> SynoConfig:
        """Get current configuration."""
        return self._config

    @property
    def is_authenticated(self) -> bool:
        """Whether a session token is held."""
        return self._session.is_authenticated

    @property
    def tasks(self) -> TaskService:
        """Task operations."""
        return self._tasks

    async def __aenter__(self) -> 'DownloadStation':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close client and release resources."""
        await self._transport.close()

    async def login(self) -> AuthData:
        """
        Log in explicitly.

        Raises:
            SynoAuthError: If the server rejects the credentials
        """
        return await self._session.login()

    async def request(self, request: ApiRequest, parser=None):
        """Run an arbitrary API call through the session and retry layer."""
        return await self._handler.execute(request, parser)

    # Task operations

    async def list_tasks(self, additional: Sequence[str] = DEFAULT_ADDITIONAL) -> TaskList:
        """Get all download tasks."""
        return await self._tasks.list_tasks(additional)

    async def get_task(
        self,
        ids: Union[str, Iterable[str]],
        additional: Sequence[str] = DEFAULT_ADDITIONAL
    ) -> TaskInfo:
        """Get details for one or more tasks."""
        return await self._tasks.get_task(ids, additional)

    async def create_task(self, uri: str, destination: str) -> TaskCreated:
        """Create a task from an HTTP(S) URL or magnet link."""
        return await self._tasks.create_task(uri, destination)

    async def create_task_from_file(
        self,
        file_data: bytes,
        file_name: str,
        destination: str
    ) -> TaskCreated:
        """Create a task from torrent file contents."""
        return await self._tasks.create_task_from_file(file_data, file_name, destination)

    async def create_task_from_path(self, path: Union[str, Path], destination: str) -> TaskCreated:
        """Create a task from a torrent file on disk."""
        return await self._tasks.create_task_from_path(path, destination)

    async def pause(self, task_id: str) -> None:
        """Pause a task."""
        await self._tasks.pause(task_id)

    async def resume(self, task_id: str) -> TaskOperation:
        """Resume a task."""
        return await self._tasks.resume(task_id)

    async def complete(self, task_id: str) -> TaskCompleted:
        """Complete a task."""
        return await self._tasks.complete(task_id)

    async def delete_task(self, task_id: str, force_complete: bool = False) -> TaskOperation:
        """Delete a task."""
        return await self._tasks.delete_task(task_id, force_complete)

    async def delete_by_status(self, status: TaskStatus) -> None:
        """Delete all tasks in a status."""
        await self._tasks.delete_by_status(status)

    async def clear_completed(self) -> None:
        """Delete all finished tasks."""
        await self._tasks.clear_completed()
