"""
Task service for Download Station.

Builds the request for each task operation and hands it to the request
handler. Session handling and retries happen there, not here.
"""
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Sequence, Union

import aiofiles

from ..api.request import ApiRequest, FilePart, quote
from ..logging import get_logger
from .models import (
    TaskCompleted,
    TaskCreated,
    TaskInfo,
    TaskList,
    TaskOperation,
    TaskStatus,
    ignore_payload,
)

if TYPE_CHECKING:
    from ..api.request import RequestHandler


TASK_API = 'SYNO.DownloadStation2.Task'
TASK_VERSION = 2
COMPLETE_API = 'SYNO.DownloadStation2.Task.Complete'
COMPLETE_VERSION = 1

DEFAULT_ADDITIONAL = ('transfer', 'detail')
TORRENT_CONTENT_TYPE = 'application/x-bittorrent'
URI_SCHEMES = ('http://', 'https://', 'magnet:')

logger = get_logger('synods.tasks')


class TaskService:
    """
    Download Station task operations.

    Example:
        >>> service = TaskService(request_handler)
        >>> tasks = await service.list_tasks()
        >>> await service.pause(tasks.task[0].id)
    """

    def __init__(self, handler: 'RequestHandler'):
        self._handler = handler

    @staticmethod
    def _task_request(method: str, **params) -> ApiRequest:
        return ApiRequest(api=TASK_API, version=TASK_VERSION, method=method, params=params)

    async def list_tasks(self, additional: Sequence[str] = DEFAULT_ADDITIONAL) -> TaskList:
        """
        Get all tasks.

        Args:
            additional: Detail sections to include

        Returns:
            TaskList with offset, total and tasks
        """
        request = self._task_request('list', additional=list(additional))
        return await self._handler.execute(request, TaskList.from_dict)

    async def get_task(
        self,
        ids: Union[str, Iterable[str]],
        additional: Sequence[str] = DEFAULT_ADDITIONAL
    ) -> TaskInfo:
        """
        Get detailed information about one or more tasks.

        Args:
            ids: Task id or ids
            additional: Detail sections to include

        Raises:
            ValueError: If no id is given
        """
        if isinstance(ids, str):
            ids = [ids]
        ids = list(ids)
        if not ids:
            raise ValueError("Task IDs cannot be empty")

        request = self._task_request('get', id=','.join(ids), additional=list(additional))
        return await self._handler.execute(request, TaskInfo.from_dict)

    async def create_task(self, uri: str, destination: str) -> TaskCreated:
        """
        Create a download task from an HTTP(S) URL or a magnet link.

        The URI is sent as-is inside a JSON list.

        Raises:
            ValueError: If the URI or destination is invalid
        """
        if not uri:
            raise ValueError("URI cannot be empty")
        if not destination:
            raise ValueError("Destination path cannot be empty")
        if not uri.startswith(URI_SCHEMES):
            raise ValueError(f"URI must start with http://, https://, or magnet:, got: {uri}")

        logger.debug("Creating download task. URI: %s, Destination: %s", uri, destination)

        request = self._task_request(
            'create',
            type=quote('url'),
            destination=quote(destination),
            url=[uri],
            create_list=False,
        )
        return await self._handler.execute(request, TaskCreated.from_dict)

    async def create_task_from_file(
        self,
        file_data: bytes,
        file_name: str,
        destination: str
    ) -> TaskCreated:
        """
        Create a download task from torrent file contents.

        Uploaded as multipart/form-data with the torrent in a part
        named ``torrent``.

        Raises:
            ValueError: If the data, name or destination is empty
        """
        if not file_data:
            raise ValueError("File data cannot be empty")
        if not file_name:
            raise ValueError("File name cannot be empty")
        if not destination:
            raise ValueError("Destination path cannot be empty")

        if not file_name.endswith('.torrent'):
            logger.warning("File name does not end with .torrent extension: %s", file_name)

        logger.debug(
            "Creating download task from file. Name: %s, Size: %d bytes, Destination: %s",
            file_name, len(file_data), destination
        )

        request = ApiRequest(
            api=TASK_API,
            version=TASK_VERSION,
            method='create',
            params={
                'type': quote('file'),
                'file': ['torrent'],
                'destination': quote(destination),
                'create_list': False,
            },
            files=(FilePart('torrent', file_name, bytes(file_data), TORRENT_CONTENT_TYPE),)
        )
        return await self._handler.execute(request, TaskCreated.from_dict)

    async def create_task_from_path(
        self,
        path: Union[str, Path],
        destination: str
    ) -> TaskCreated:
        """
        Create a download task from a torrent file on disk.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = Path(path)
        async with aiofiles.open(path, 'rb') as f:
            data = await f.read()
        return await self.create_task_from_file(data, path.name, destination)

    async def pause(self, task_id: str) -> None:
        """Pause a task."""
        await self._handler.execute(self._task_request('pause', id=task_id), ignore_payload)

    async def resume(self, task_id: str) -> TaskOperation:
        """Resume a task."""
        return await self._handler.execute(
            self._task_request('resume', id=task_id), TaskOperation.from_dict
        )

    async def complete(self, task_id: str) -> TaskCompleted:
        """Finalize a task through SYNO.DownloadStation2.Task.Complete."""
        request = ApiRequest(
            api=COMPLETE_API,
            version=COMPLETE_VERSION,
            method='start',
            params={'id': task_id}
        )
        return await self._handler.execute(request, TaskCompleted.from_dict)

    async def delete_task(self, task_id: str, force_complete: bool = False) -> TaskOperation:
        """
        Delete a task.

        Args:
            task_id: Task id
            force_complete: Move partially downloaded files to the destination
        """
        request = self._task_request('delete', id=task_id, force_complete=force_complete)
        return await self._handler.execute(request, TaskOperation.from_dict)

    async def delete_by_status(self, status: TaskStatus) -> None:
        """Delete every task in the given status."""
        request = self._task_request('delete_condition', status=int(status))
        await self._handler.execute(request, ignore_payload)

    async def clear_completed(self) -> None:
        """Delete every finished task."""
        await self.delete_by_status(TaskStatus.FINISHED)
