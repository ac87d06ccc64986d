"""枚举定义

包含 TaskStatus、TaskPriority、LifecycleEventKind、NotificationKind、
PriorityHint、DeliveryOutcome 枚举，以及 TERMINAL_STATES 终态集合。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task 状态

    集合可扩展；未知状态字符串由 Task.status 原样保留，分类器不做特殊处理。
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"
    CANCELLED = "cancelled"


# 终态：不再期望流转，但出现流转时也不报错
TERMINAL_STATES: set[TaskStatus] = {
    TaskStatus.COMPLETED,
    TaskStatus.CANCELLED,
}


class TaskPriority(StrEnum):
    """任务优先级（只用于消息展示，不参与路由）"""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class LifecycleEventKind(StrEnum):
    """任务生命周期事件类型"""

    CREATED = "created"
    UPDATED = "updated"
    NOTE_ADDED = "note_added"


class NotificationKind(StrEnum):
    """通知类型"""

    COMPLETION = "completion"
    ASSIGNMENT = "assignment"
    STATUS_CHANGE = "status_change"
    NOTE_ADDED = "note_added"


class PriorityHint(StrEnum):
    """投递顺序提示，本层不强制执行"""

    IMMEDIATE = "immediate"
    BACKGROUND = "background"


class DeliveryOutcome(StrEnum):
    """单条通知的投递结果"""

    DELIVERED = "delivered"
    SKIPPED = "skipped"
    FAILED = "failed"


def is_terminal(status: str) -> bool:
    """判断状态是否为终态（未知状态视为非终态）"""
    return status in TERMINAL_STATES
