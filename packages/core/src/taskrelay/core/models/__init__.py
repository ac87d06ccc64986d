"""TaskRelay Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import (
    TERMINAL_STATES,
    DeliveryOutcome,
    LifecycleEventKind,
    NotificationKind,
    PriorityHint,
    TaskPriority,
    TaskStatus,
    is_terminal,
)
from .event import (
    TaskCreatedEvent,
    TaskLifecycleEvent,
    TaskNoteAddedEvent,
    TaskUpdatedEvent,
    parse_lifecycle_event,
)
from .intent import NotificationIntent
from .task import Task, TaskNote

__all__ = [
    # 枚举
    "TaskStatus",
    "TaskPriority",
    "LifecycleEventKind",
    "NotificationKind",
    "PriorityHint",
    "DeliveryOutcome",
    "TERMINAL_STATES",
    "is_terminal",
    # Task
    "Task",
    "TaskNote",
    # Event
    "TaskLifecycleEvent",
    "TaskCreatedEvent",
    "TaskUpdatedEvent",
    "TaskNoteAddedEvent",
    "parse_lifecycle_event",
    # Intent
    "NotificationIntent",
]
