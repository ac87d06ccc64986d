"""Domain Models 单元测试

测试内容：
1. 枚举值
2. Task / TaskNote 模型校验
3. 生命周期事件判别联合解析
4. NotificationIntent 不可变
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError
from taskrelay.core.models import (
    TERMINAL_STATES,
    DeliveryOutcome,
    LifecycleEventKind,
    NotificationIntent,
    NotificationKind,
    PriorityHint,
    Task,
    TaskCreatedEvent,
    TaskNoteAddedEvent,
    TaskPriority,
    TaskStatus,
    TaskUpdatedEvent,
    is_terminal,
    parse_lifecycle_event,
)


class TestEnums:
    """枚举值测试"""

    def test_task_status_values(self):
        """TaskStatus 枚举值正确"""
        assert TaskStatus.PENDING == "pending"
        assert TaskStatus.IN_PROGRESS == "in_progress"
        assert TaskStatus.COMPLETED == "completed"
        assert TaskStatus.BLOCKED == "blocked"
        assert TaskStatus.CANCELLED == "cancelled"

    def test_terminal_states(self):
        """completed / cancelled 为终态"""
        assert TERMINAL_STATES == {TaskStatus.COMPLETED, TaskStatus.CANCELLED}
        assert is_terminal("completed")
        assert not is_terminal("in_progress")
        assert not is_terminal("archived")

    def test_event_and_notification_kinds(self):
        """事件类型、通知类型、投递结果枚举值"""
        assert LifecycleEventKind.NOTE_ADDED == "note_added"
        assert NotificationKind.STATUS_CHANGE == "status_change"
        assert PriorityHint.IMMEDIATE == "immediate"
        assert DeliveryOutcome.SKIPPED == "skipped"
        assert TaskPriority.HIGH == "high"


class TestTaskModel:
    """Task 模型测试"""

    def test_defaults(self):
        """默认字段值"""
        now = datetime.now(UTC)
        task = Task(
            task_id="t-default",
            title="Default",
            created_by="A",
            created_at=now,
            updated_at=now,
        )
        assert task.status == TaskStatus.PENDING
        assert task.assigned_to is None
        assert task.prompt == ""
        assert task.priority == TaskPriority.MEDIUM
        assert task.notes == []

    def test_unknown_status_is_preserved(self, make_task):
        """未知状态字符串原样保留，不报错"""
        task = make_task(status="archived")
        assert task.status == "archived"

    def test_missing_required_field_rejected(self):
        """缺少 created_by 被拒绝"""
        now = datetime.now(UTC)
        with pytest.raises(ValidationError):
            Task(task_id="t", title="x", created_at=now, updated_at=now)

    def test_find_note_and_latest_note(self, make_task, make_note):
        """按 ID 查找备注 + 最近备注"""
        first = make_note(note_id="n1", content="first")
        second = make_note(note_id="n2", content="second")
        task = make_task(notes=[first, second])

        assert task.find_note("n1") == first
        assert task.find_note("missing") is None
        assert task.find_note(None) is None
        assert task.latest_note == second
        assert make_task().latest_note is None


class TestLifecycleEvents:
    """生命周期事件测试"""

    def test_parse_dispatches_on_kind(self, make_task):
        """parse_lifecycle_event 按 kind 分派到具体类型"""
        task_data = make_task().model_dump()

        created = parse_lifecycle_event({"kind": "created", "task": task_data, "actor": "A"})
        updated = parse_lifecycle_event({"kind": "updated", "task": task_data, "actor": "B"})
        noted = parse_lifecycle_event({"kind": "note_added", "task": task_data, "actor": "B"})

        assert isinstance(created, TaskCreatedEvent)
        assert isinstance(updated, TaskUpdatedEvent)
        assert isinstance(noted, TaskNoteAddedEvent)
        assert created.kind == LifecycleEventKind.CREATED

    def test_parse_unknown_kind_rejected(self, make_task):
        """未知 kind 被拒绝"""
        with pytest.raises(ValidationError):
            parse_lifecycle_event(
                {"kind": "deleted", "task": make_task().model_dump(), "actor": "A"}
            )

    def test_triggering_note_defaults_to_latest(self, make_task, make_note):
        """未显式给出 note 时取任务最后一条备注"""
        latest = make_note(note_id="n2", content="latest")
        task = make_task(notes=[make_note(note_id="n1"), latest])

        event = TaskNoteAddedEvent(task=task, actor="B")
        assert event.triggering_note == latest

        explicit = make_note(note_id="n9", content="explicit")
        assert TaskNoteAddedEvent(task=task, actor="B", note=explicit).triggering_note == explicit

    def test_event_timestamp_defaults_to_now(self, make_task):
        """ts 缺省为当前 UTC 时间"""
        event = TaskCreatedEvent(task=make_task(), actor="A")
        assert event.ts.tzinfo is not None


class TestNotificationIntent:
    """NotificationIntent 模型测试"""

    def test_intent_is_frozen(self):
        """Intent 不可变"""
        intent = NotificationIntent(
            target="A",
            kind=NotificationKind.COMPLETION,
            task_id="t1",
            task_title="Fix bug",
            priority_hint=PriorityHint.IMMEDIATE,
        )
        with pytest.raises(ValidationError):
            intent.target = "B"

    def test_intent_defaults(self):
        """默认后台优先级，非改派告知"""
        intent = NotificationIntent(
            target="A",
            kind=NotificationKind.NOTE_ADDED,
            task_id="t1",
            task_title="Fix bug",
        )
        assert intent.priority_hint == PriorityHint.BACKGROUND
        assert intent.unassigned is False
        assert intent.note_id is None
