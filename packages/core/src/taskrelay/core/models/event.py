"""Task 生命周期事件

事件是封闭的判别联合（discriminated union）：
created | updated | note_added，按 kind 字段分派。
事件本身不携带变更前的任务快照，previous_task 由调用方单独传入。
"""

from datetime import UTC, datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from .task import Task, TaskNote


def _utcnow() -> datetime:
    return datetime.now(UTC)


class _LifecycleEventBase(BaseModel):
    """生命周期事件公共字段"""

    task: Task = Field(description="事件发生后的任务快照")
    actor: str = Field(description="触发事件的身份")
    ts: datetime = Field(default_factory=_utcnow, description="事件时间戳")


class TaskCreatedEvent(_LifecycleEventBase):
    """任务创建事件"""

    kind: Literal["created"] = "created"


class TaskUpdatedEvent(_LifecycleEventBase):
    """任务更新事件（状态、负责人等字段变化）"""

    kind: Literal["updated"] = "updated"


class TaskNoteAddedEvent(_LifecycleEventBase):
    """备注追加事件

    note 缺省时以 task.notes 的最后一条作为触发备注。
    """

    kind: Literal["note_added"] = "note_added"
    note: TaskNote | None = Field(default=None, description="触发事件的备注")

    @property
    def triggering_note(self) -> TaskNote | None:
        """实际触发事件的备注"""
        return self.note if self.note is not None else self.task.latest_note


TaskLifecycleEvent = Annotated[
    TaskCreatedEvent | TaskUpdatedEvent | TaskNoteAddedEvent,
    Field(discriminator="kind"),
]

_event_adapter: TypeAdapter[TaskLifecycleEvent] = TypeAdapter(TaskLifecycleEvent)


def parse_lifecycle_event(data: dict[str, Any]) -> TaskLifecycleEvent:
    """将原始 dict 校验为具体的生命周期事件类型

    Raises:
        pydantic.ValidationError: kind 未知或字段缺失
    """
    return _event_adapter.validate_python(data)
