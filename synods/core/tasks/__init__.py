"""Download Station task models and operations."""
from .models import (
    AdditionalTaskInfo,
    Detail,
    FailedTask,
    Peer,
    StatusExtra,
    Task,
    TaskCompleted,
    TaskCreated,
    TaskFile,
    TaskInfo,
    TaskList,
    TaskOperation,
    TaskStatus,
    Tracker,
    Transfer,
)
from .service import TaskService

__all__ = [
    'AdditionalTaskInfo',
    'Detail',
    'FailedTask',
    'Peer',
    'StatusExtra',
    'Task',
    'TaskCompleted',
    'TaskCreated',
    'TaskFile',
    'TaskInfo',
    'TaskList',
    'TaskOperation',
    'TaskService',
    'TaskStatus',
    'Tracker',
    'Transfer',
]
