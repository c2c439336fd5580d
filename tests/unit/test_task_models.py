"""Tests for task models."""
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from synods.core.tasks import (
    AdditionalTaskInfo,
    Task,
    TaskList,
    TaskOperation,
    TaskStatus,
    Transfer,
)


class TestTask:
    """Test suite for Task."""

    @pytest.fixture
    def task(self, sample_task_data):
        return Task.from_dict(sample_task_data)

    def test_from_dict(self, task):
        """Test basic fields are mapped."""
        assert task.id == 'task_id_1'
        assert task.task_type == 'bt'
        assert task.status is TaskStatus.DOWNLOADING
        assert task.status_extra is None
        assert task.additional.transfer.speed_download == 98765

    def test_detail_sections(self, sample_detailed_task_data):
        """Test nested sections and timestamps."""
        task = Task.from_dict(sample_detailed_task_data)
        detail = task.additional.detail

        assert detail.created_time == datetime(2023, 11, 13, 18, 26, 40, tzinfo=timezone.utc)
        assert detail.destination == 'downloads'
        assert len(task.additional.file) == 1
        assert task.additional.peer[0].progress == 0.5
        assert task.additional.tracker[0].seeds == 5

    def test_round_trip(self, sample_detailed_task_data):
        """Test to_dict reproduces the payload accepted by from_dict."""
        task = Task.from_dict(sample_detailed_task_data)

        assert Task.from_dict(task.to_dict()) == task

    def test_is_immutable(self, task):
        """Test snapshots cannot be changed."""
        with pytest.raises(AttributeError):
            task.title = 'changed'

    def test_unknown_status(self, sample_task_data):
        """Test unknown status codes are rejected."""
        with pytest.raises(ValueError):
            Task.from_dict(dict(sample_task_data, status=999))

    def test_progress(self, task):
        """Test progress in percent."""
        transfer = replace(task.transfer, size_downloaded=617_283_945)
        task = replace(task, additional=AdditionalTaskInfo(transfer=transfer))

        assert task.progress == 50.0

    def test_progress_without_size(self, task):
        """Test zero-size tasks report no progress."""
        assert replace(task, size=0).progress == 0.0

    def test_current_speed_downloading(self, task):
        """Test download speed while downloading."""
        assert task.current_speed == 98765

    def test_current_speed_seeding(self, task):
        """Test upload speed while seeding."""
        transfer = Transfer(speed_download=0, speed_upload=45678)
        task = replace(task, status=TaskStatus.SEEDING, additional=AdditionalTaskInfo(transfer=transfer))

        assert task.current_speed == 45678

    def test_current_speed_paused(self, task):
        """Test paused tasks report no speed."""
        assert replace(task, status=TaskStatus.PAUSED).current_speed == 0

    def test_seconds_left(self, task):
        """Test remaining time estimate."""
        assert task.seconds_left == 12500

    def test_seconds_left_stalled(self, task):
        """Test a stalled download has no estimate."""
        task = replace(task, additional=AdditionalTaskInfo(transfer=Transfer()))

        assert task.seconds_left is None

    def test_seconds_left_not_downloading(self, task):
        """Test non-downloading tasks have no estimate."""
        assert replace(task, status=TaskStatus.FINISHED).seconds_left is None

    def test_ratio(self, task):
        """Test upload/download ratio."""
        transfer = Transfer(size_downloaded=3191664632, size_uploaded=2367251000)
        task = replace(task, status=TaskStatus.SEEDING, additional=AdditionalTaskInfo(transfer=transfer))

        assert task.ratio == 0.7416979140808425

    def test_ratio_zero(self, task):
        """Test ratio is zero when nothing was downloaded."""
        assert task.ratio == 0.0


class TestTaskStatus:
    """Test suite for TaskStatus."""

    def test_finished_value(self):
        assert TaskStatus.FINISHED == 5

    def test_is_error(self):
        assert TaskStatus.ERROR_DISK_FULL.is_error is True
        assert TaskStatus.SEEDING.is_error is False


class TestCollections:
    """Test suite for list and operation payloads."""

    def test_task_list(self, sample_task_data):
        """Test list payloads."""
        tasks = TaskList.from_dict({'offset': 0, 'total': 1, 'task': [sample_task_data]})

        assert tasks.total == 1
        assert tasks.task[0].title == 'Ubuntu 16.04'
        assert TaskList.from_dict(tasks.to_dict()) == tasks

    def test_task_operation(self):
        """Test operation payloads."""
        result = TaskOperation.from_dict({'failed_task': [{'id': 'x', 'error': 405}]})

        assert result.ok is False
        assert result.failed_task[0].id == 'x'
