"""
Data models for Download Station tasks.

Immutable snapshots built from API payloads with ``from_dict``. They are
not updated after being returned; fetch again for fresh values.
"""
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple


def _from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def _to_timestamp(value: datetime) -> int:
    return int(value.timestamp())


class TaskStatus(IntEnum):
    """Download task status."""
    WAITING = 1
    DOWNLOADING = 2
    PAUSED = 3
    FINISHING = 4
    FINISHED = 5
    HASH_CHECKING = 6
    PRE_SEEDING = 7
    SEEDING = 8
    FILEHOSTING_WAITING = 9
    EXTRACTING = 10
    PREPROCESSING = 11
    PREPROCESS_PASS = 12
    DOWNLOADED = 13
    POSTPROCESSING = 14
    CAPTCHA_NEEDED = 15
    ERROR = 101
    ERROR_BROKEN_LINK = 102
    ERROR_DEST_NO_EXIST = 103
    ERROR_DEST_DENY = 104
    ERROR_DISK_FULL = 105
    ERROR_QUOTA_REACHED = 106
    ERROR_TIMEOUT = 107
    ERROR_EXCEED_MAX_FS_SIZE = 108
    ERROR_EXCEED_MAX_TEMP_FS_SIZE = 109
    ERROR_EXCEED_MAX_DEST_FS_SIZE = 110
    ERROR_NAME_TOO_LONG_ENCRYPTION = 111
    ERROR_NAME_TOO_LONG = 112
    ERROR_TORRENT_DUPLICATE = 113
    ERROR_FILE_NO_EXIST = 114
    ERROR_REQUIRED_PREMIUM = 115
    ERROR_NOT_SUPPORT_TYPE = 116
    ERROR_FTP_ENCRYPTION_NOT_SUPPORT_TYPE = 117
    ERROR_EXTRACT_FAIL = 118
    ERROR_EXTRACT_WRONG_PASSWORD = 119
    ERROR_EXTRACT_INVALID_ARCHIVE = 120
    ERROR_EXTRACT_QUOTA_REACHED = 121
    ERROR_EXTRACT_DISK_FULL = 122
    ERROR_TORRENT_INVALID = 123
    ERROR_REQUIRED_ACCOUNT = 124
    ERROR_TRY_IT_LATER = 125
    ERROR_ENCRYPTION = 126
    ERROR_MISSING_PYTHON = 127
    ERROR_PRIVATE_VIDEO = 128
    ERROR_EXTRACT_FOLDER_NOT_EXIST = 129
    ERROR_NZB_MISSING_ARTICLE = 130
    ERROR_ED2K_LINK_DUPLICATE = 131
    ERROR_DEST_FILE_DUPLICATE = 132
    ERROR_PARCHIVE_REPAIR_FAILED = 133
    ERROR_INVALID_ACCOUNT_PASSWORD = 134

    @property
    def is_error(self) -> bool:
        return self.value >= 101


@dataclass(frozen=True)
class StatusExtra:
    """Extra status details."""
    error_detail: Optional[str] = None
    unzip_progress: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StatusExtra':
        return cls(
            error_detail=data.get('error_detail'),
            unzip_progress=data.get('unzip_progress'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'error_detail': self.error_detail, 'unzip_progress': self.unzip_progress}


@dataclass(frozen=True)
class Detail:
    """Detailed task information."""
    completed_time: datetime
    connected_leechers: int
    connected_peers: int
    connected_seeders: int
    created_time: datetime
    destination: str
    seed_elapsed: int
    started_time: datetime
    total_peers: int
    total_pieces: int
    uri: str
    waiting_seconds: int
    unzip_password: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Detail':
        return cls(
            completed_time=_from_timestamp(data['completed_time']),
            connected_leechers=data['connected_leechers'],
            connected_peers=data['connected_peers'],
            connected_seeders=data['connected_seeders'],
            created_time=_from_timestamp(data['created_time']),
            destination=data['destination'],
            seed_elapsed=data['seed_elapsed'],
            started_time=_from_timestamp(data['started_time']),
            total_peers=data['total_peers'],
            total_pieces=data['total_pieces'],
            uri=data['uri'],
            waiting_seconds=data['waiting_seconds'],
            unzip_password=data.get('unzip_password'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'completed_time': _to_timestamp(self.completed_time),
            'connected_leechers': self.connected_leechers,
            'connected_peers': self.connected_peers,
            'connected_seeders': self.connected_seeders,
            'created_time': _to_timestamp(self.created_time),
            'destination': self.destination,
            'seed_elapsed': self.seed_elapsed,
            'started_time': _to_timestamp(self.started_time),
            'total_peers': self.total_peers,
            'total_pieces': self.total_pieces,
            'uri': self.uri,
            'waiting_seconds': self.waiting_seconds,
            'unzip_password': self.unzip_password,
        }


@dataclass(frozen=True)
class TaskFile:
    """A file inside a download task."""
    filename: str
    index: int
    priority: str
    size: int
    size_downloaded: int
    wanted: bool

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskFile':
        return cls(
            filename=data['filename'],
            index=data['index'],
            priority=data['priority'],
            size=data['size'],
            size_downloaded=data['size_downloaded'],
            wanted=data['wanted'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'filename': self.filename,
            'index': self.index,
            'priority': self.priority,
            'size': self.size,
            'size_downloaded': self.size_downloaded,
            'wanted': self.wanted,
        }


@dataclass(frozen=True)
class Peer:
    """A connected peer."""
    address: str
    agent: str
    progress: float
    speed_download: int
    speed_upload: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Peer':
        return cls(
            address=data['address'],
            agent=data['agent'],
            progress=float(data['progress']),
            speed_download=data['speed_download'],
            speed_upload=data['speed_upload'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'address': self.address,
            'agent': self.agent,
            'progress': self.progress,
            'speed_download': self.speed_download,
            'speed_upload': self.speed_upload,
        }


@dataclass(frozen=True)
class Tracker:
    """A tracker of a BitTorrent task."""
    peers: int
    seeds: int
    status: str
    update_timer: int
    url: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Tracker':
        return cls(
            peers=data['peers'],
            seeds=data['seeds'],
            status=data['status'],
            update_timer=data['update_timer'],
            url=data['url'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'peers': self.peers,
            'seeds': self.seeds,
            'status': self.status,
            'update_timer': self.update_timer,
            'url': self.url,
        }


@dataclass(frozen=True)
class Transfer:
    """Transfer statistics."""
    downloaded_pieces: int = 0
    size_downloaded: int = 0
    size_uploaded: int = 0
    speed_download: int = 0
    speed_upload: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Transfer':
        return cls(
            downloaded_pieces=data['downloaded_pieces'],
            size_downloaded=data['size_downloaded'],
            size_uploaded=data['size_uploaded'],
            speed_download=data['speed_download'],
            speed_upload=data['speed_upload'],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'downloaded_pieces': self.downloaded_pieces,
            'size_downloaded': self.size_downloaded,
            'size_uploaded': self.size_uploaded,
            'speed_download': self.speed_download,
            'speed_upload': self.speed_upload,
        }


@dataclass(frozen=True)
class AdditionalTaskInfo:
    """Optional detail sections requested through ``additional``."""
    detail: Optional[Detail] = None
    file: Optional[Tuple[TaskFile, ...]] = None
    peer: Optional[Tuple[Peer, ...]] = None
    tracker: Optional[Tuple[Tracker, ...]] = None
    transfer: Optional[Transfer] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AdditionalTaskInfo':
        def many(key, model):
            items = data.get(key)
            if items is None:
                return None
            return tuple(model.from_dict(item) for item in items)

        return cls(
            detail=Detail.from_dict(data['detail']) if data.get('detail') is not None else None,
            file=many('file', TaskFile),
            peer=many('peer', Peer),
            tracker=many('tracker', Tracker),
            transfer=Transfer.from_dict(data['transfer']) if data.get('transfer') is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.detail is not None:
            result['detail'] = self.detail.to_dict()
        for key in ('file', 'peer', 'tracker'):
            items = getattr(self, key)
            if items is not None:
                result[key] = [item.to_dict() for item in items]
        if self.transfer is not None:
            result['transfer'] = self.transfer.to_dict()
        return result


@dataclass(frozen=True)
class Task:
    """
    A download task.

    Attributes:
        id: Unique task identifier
        username: Owner of the task
        task_type: Kind of download, e.g. ``bt`` for BitTorrent
        title: Task title
        size: Total size in bytes
        status: Current status
        status_extra: Extra status details, if any
        additional: Requested detail sections, if any
    """
    id: str
    username: str
    task_type: str
    title: str
    size: int
    status: TaskStatus
    status_extra: Optional[StatusExtra] = None
    additional: Optional[AdditionalTaskInfo] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        status_extra = data.get('status_extra')
        additional = data.get('additional')
        return cls(
            id=data['id'],
            username=data['username'],
            task_type=data['type'],
            title=data['title'],
            size=data['size'],
            status=TaskStatus(data['status']),
            status_extra=StatusExtra.from_dict(status_extra) if status_extra is not None else None,
            additional=AdditionalTaskInfo.from_dict(additional) if additional is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'id': self.id,
            'username': self.username,
            'type': self.task_type,
            'title': self.title,
            'size': self.size,
            'status': int(self.status),
        }
        if self.status_extra is not None:
            result['status_extra'] = self.status_extra.to_dict()
        if self.additional is not None:
            result['additional'] = self.additional.to_dict()
        return result

    @property
    def transfer(self) -> Optional[Transfer]:
        return self.additional.transfer if self.additional else None

    @property
    def progress(self) -> float:
        """Downloaded share in percent, rounded; 0 when unknown."""
        transfer = self.transfer
        if transfer is None or self.size == 0:
            return 0.0
        return float(round(transfer.size_downloaded / self.size * 100))

    @property
    def current_speed(self) -> int:
        """Download speed while downloading, upload speed while seeding."""
        transfer = self.transfer
        if transfer is None:
            return 0
        if self.status == TaskStatus.DOWNLOADING:
            return transfer.speed_download
        if self.status == TaskStatus.SEEDING:
            return transfer.speed_upload
        return 0

    @property
    def seconds_left(self) -> Optional[int]:
        """Estimated seconds until done; None when not downloading or stalled."""
        transfer = self.transfer
        if self.status != TaskStatus.DOWNLOADING or transfer is None:
            return None
        if transfer.speed_download == 0:
            return None
        return math.floor((self.size - transfer.size_downloaded) / transfer.speed_download)

    @property
    def ratio(self) -> float:
        """Upload/download ratio."""
        transfer = self.transfer
        if transfer is None or transfer.size_downloaded == 0:
            return 0.0
        return transfer.size_uploaded / transfer.size_downloaded


@dataclass(frozen=True)
class TaskList:
    """One page of tasks as returned by ``list``."""
    offset: int
    total: int
    task: Tuple[Task, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskList':
        return cls(
            offset=data['offset'],
            total=data['total'],
            task=tuple(Task.from_dict(item) for item in data['task']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'offset': self.offset,
            'total': self.total,
            'task': [task.to_dict() for task in self.task],
        }


@dataclass(frozen=True)
class TaskInfo:
    """Tasks returned by ``get``."""
    task: Tuple[Task, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskInfo':
        return cls(task=tuple(Task.from_dict(item) for item in data['task']))


@dataclass(frozen=True)
class TaskCreated:
    """Result of a create call."""
    list_id: Tuple[str, ...] = ()
    task_id: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskCreated':
        return cls(list_id=tuple(data['list_id']), task_id=tuple(data['task_id']))


@dataclass(frozen=True)
class TaskCompleted:
    """Result of completing a task."""
    task_id: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskCompleted':
        return cls(task_id=data['task_id'])


@dataclass(frozen=True)
class FailedTask:
    """A task an operation could not be applied to."""
    id: str
    error: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FailedTask':
        return cls(id=data['id'], error=data['error'])


@dataclass(frozen=True)
class TaskOperation:
    """Result of resume/delete: the tasks that failed."""
    failed_task: Tuple[FailedTask, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskOperation':
        return cls(failed_task=tuple(FailedTask.from_dict(item) for item in data['failed_task']))

    @property
    def ok(self) -> bool:
        return not self.failed_task


def ignore_payload(data: Any) -> None:
    """Parser for calls whose payload carries nothing of interest."""
    return None
