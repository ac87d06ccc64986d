"""Event Classifier -- 生命周期事件 -> 通知意图

纯函数，无 I/O，不会因数据残缺而抛异常。

规则按事件类型独立求值，同一事件可命中多条：
1. created 且已指派 -> 通知负责人（assignment）
2. updated 且负责人变化 -> 通知新负责人（assignment）+ 旧负责人（改派告知）
3. updated 且状态变为 completed -> 通知创建者（completion）
4. updated 且状态发生其他变化 -> 通知创建者（status_change），与 3 互斥
5. note_added 且作者非创建者、正文超过阈值 -> 通知创建者（note_added）

最后统一过滤：目标为空、目标等于 actor 的意图一律丢弃。
"""

import structlog
from taskrelay.core.models import (
    NotificationIntent,
    NotificationKind,
    PriorityHint,
    Task,
    TaskCreatedEvent,
    TaskLifecycleEvent,
    TaskNoteAddedEvent,
    TaskStatus,
    TaskUpdatedEvent,
)

from .config import DEFAULT_NOTE_MIN_LENGTH

log = structlog.get_logger()


def classify(
    event: TaskLifecycleEvent,
    previous_task: Task | None,
    *,
    note_min_length: int = DEFAULT_NOTE_MIN_LENGTH,
) -> list[NotificationIntent]:
    """计算事件对应的通知意图

    Args:
        event: 生命周期事件（事件后的任务快照 + actor）
        previous_task: 调用方持有的上一次快照，未知时为 None
        note_min_length: 备注触发通知的最小长度（严格大于）

    Returns:
        有序的 NotificationIntent 列表（通常 0-2 个），顺序仅用于确定性测试
    """
    if isinstance(event, TaskCreatedEvent):
        candidates = _classify_created(event)
    elif isinstance(event, TaskUpdatedEvent):
        candidates = _classify_updated(event, previous_task)
    elif isinstance(event, TaskNoteAddedEvent):
        candidates = _classify_note_added(event, note_min_length)
    else:
        log.debug("unknown_lifecycle_event", event_type=type(event).__name__)
        candidates = []

    # 全局自通知抑制 + 空目标过滤
    actor = _identity(event.actor)
    return [
        intent
        for intent in candidates
        if _identity(intent.target) is not None and intent.target != actor
    ]


def _identity(value: str | None) -> str | None:
    """空字符串与 None 同等视为无身份"""
    return value if value else None


def _intent(
    task: Task,
    target: str | None,
    kind: NotificationKind,
    priority_hint: PriorityHint = PriorityHint.BACKGROUND,
    **context,
) -> NotificationIntent:
    return NotificationIntent(
        target=target or "",
        kind=kind,
        task_id=task.task_id,
        task_title=task.title,
        priority_hint=priority_hint,
        **context,
    )


def _classify_created(event: TaskCreatedEvent) -> list[NotificationIntent]:
    task = event.task
    assignee = _identity(task.assigned_to)
    if assignee is None:
        return []
    return [
        _intent(
            task,
            assignee,
            NotificationKind.ASSIGNMENT,
            new_status=str(task.status),
            new_assignee=assignee,
        )
    ]


def _classify_updated(
    event: TaskUpdatedEvent,
    previous_task: Task | None,
) -> list[NotificationIntent]:
    task = event.task
    if previous_task is None:
        # 无上一次快照，无法检测任何流转
        log.debug("update_without_previous_snapshot", task_id=task.task_id)
        return []

    intents: list[NotificationIntent] = []

    old_assignee = _identity(previous_task.assigned_to)
    new_assignee = _identity(task.assigned_to)
    if old_assignee != new_assignee:
        if new_assignee is not None:
            intents.append(
                _intent(
                    task,
                    new_assignee,
                    NotificationKind.ASSIGNMENT,
                    new_status=str(task.status),
                    previous_assignee=old_assignee,
                    new_assignee=new_assignee,
                )
            )
        if old_assignee is not None:
            intents.append(
                _intent(
                    task,
                    old_assignee,
                    NotificationKind.STATUS_CHANGE,
                    new_status=str(task.status),
                    previous_assignee=old_assignee,
                    new_assignee=new_assignee,
                    unassigned=True,
                )
            )

    previous_status = previous_task.status
    new_status = task.status
    if previous_status != new_status:
        # completion 是 status_change 的特化，二者只命中其一
        if new_status == TaskStatus.COMPLETED:
            kind = NotificationKind.COMPLETION
            priority_hint = PriorityHint.IMMEDIATE
        else:
            kind = NotificationKind.STATUS_CHANGE
            priority_hint = PriorityHint.BACKGROUND
        intents.append(
            _intent(
                task,
                _identity(task.created_by),
                kind,
                priority_hint,
                previous_status=str(previous_status),
                new_status=str(new_status),
            )
        )

    return intents


def _classify_note_added(
    event: TaskNoteAddedEvent,
    note_min_length: int,
) -> list[NotificationIntent]:
    task = event.task
    note = event.triggering_note
    if note is None:
        log.debug("note_event_without_note", task_id=task.task_id)
        return []

    creator = _identity(task.created_by)
    if note.author == creator:
        return []
    if len(note.content) <= note_min_length:
        return []

    return [
        _intent(
            task,
            creator,
            NotificationKind.NOTE_ADDED,
            note_id=note.note_id,
            note_author=note.author,
            note_content=note.content,
        )
    ]
