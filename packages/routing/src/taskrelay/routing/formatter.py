"""Message Formatter -- NotificationIntent -> 通知文本

每种通知类型一个纯函数，可独立用字面量输入测试。
可选字段缺失时回退到占位文本，从不抛异常。
"""

from collections.abc import Callable

from taskrelay.core.config import NOTIFICATION_HEADER
from taskrelay.core.models import (
    NotificationIntent,
    NotificationKind,
    Task,
    TaskPriority,
    TaskStatus,
)

from .config import DEFAULT_NOTE_EXCERPT_LENGTH

UNKNOWN = "(unknown)"
UNASSIGNED = "(unassigned)"
NO_PROMPT = "(no prompt provided)"
NOTE_UNAVAILABLE = "(note content unavailable)"

INSTRUCTIONS_BEGIN = "--- TASK INSTRUCTIONS ---"
INSTRUCTIONS_END = "--- END INSTRUCTIONS ---"


def _or(value: str | None, placeholder: str = UNKNOWN) -> str:
    return value if value else placeholder


def _label(intent: NotificationIntent, task: Task) -> str:
    """任务引用：标题 + ID"""
    title = _or(intent.task_title or task.title, "(untitled)")
    task_id = _or(intent.task_id or task.task_id)
    return f'"{title}" ({task_id})'


def _excerpt(content: str, limit: int) -> str:
    if len(content) <= limit:
        return content
    return content[:limit].rstrip() + "…"


def format_completion(intent: NotificationIntent, task: Task, actor: str | None) -> str:
    """任务完成通知（发给创建者）"""
    return "\n".join(
        [
            NOTIFICATION_HEADER,
            f"✅ Task {_label(intent, task)} has been completed by {_or(actor)}.",
            "",
            "Please review the results or create follow-up tasks if more work is needed.",
        ]
    )


def format_assignment(intent: NotificationIntent, task: Task, actor: str | None) -> str:
    """任务指派通知（发给负责人）

    prompt 用分隔行包裹，便于接收方区分任务说明与其他内容。
    """
    prompt = task.prompt.strip() if task.prompt else ""
    lines = [
        NOTIFICATION_HEADER,
        f"📋 You have been assigned task {_label(intent, task)}.",
        f"Created by: {_or(task.created_by)}",
    ]
    if actor and actor != task.created_by:
        lines.append(f"Assigned by: {actor}")
    lines.extend(
        [
            f"Priority: {task.priority or TaskPriority.MEDIUM}",
            "",
            INSTRUCTIONS_BEGIN,
            prompt or NO_PROMPT,
            INSTRUCTIONS_END,
            "",
            "Available actions:",
            "- add note: record progress, findings or questions on the task",
            "- complete: mark the task as completed when the work is done",
        ]
    )
    return "\n".join(lines)


def format_status_change(intent: NotificationIntent, task: Task, actor: str | None) -> str:
    """状态变化通知

    unassigned=True 时渲染为改派告知（发给旧负责人），否则发给创建者。
    """
    if intent.unassigned:
        return _format_unassigned(intent, task, actor)

    new_status = _or(intent.new_status or task.status)
    who = _or(actor)
    label = _label(intent, task)
    if new_status == TaskStatus.IN_PROGRESS:
        headline = f"🔄 {who} started working on task {label}."
    elif new_status == TaskStatus.BLOCKED:
        headline = f"⛔ Task {label} is blocked: {who} encountered an issue and may need help."
    elif new_status == TaskStatus.CANCELLED:
        headline = f"🚫 Task {label} was cancelled by {who}."
    else:
        headline = f"ℹ️ Task {label} changed status."

    lines = [NOTIFICATION_HEADER, headline]
    if intent.previous_status:
        lines.append(f"Status: {intent.previous_status} -> {new_status}")
    else:
        lines.append(f"Status: {new_status}")
    lines.append(f"Changed by: {who}")
    return "\n".join(lines)


def _format_unassigned(intent: NotificationIntent, task: Task, actor: str | None) -> str:
    label = _label(intent, task)
    new_assignee = intent.new_assignee
    if new_assignee:
        headline = f"↪️ Task {label} has been reassigned to {new_assignee} by {_or(actor)}."
    else:
        headline = (
            f"↪️ Task {label} has been reassigned by {_or(actor)} "
            f"and is currently {UNASSIGNED}."
        )
    return "\n".join(
        [
            NOTIFICATION_HEADER,
            headline,
            "You are no longer responsible for this task.",
        ]
    )


def format_note_added(
    intent: NotificationIntent,
    task: Task,
    actor: str | None,
    *,
    note_excerpt_length: int = DEFAULT_NOTE_EXCERPT_LENGTH,
) -> str:
    """新备注通知（发给创建者）

    优先使用意图携带的备注；意图未携带时按 note_id 在任务中查找。
    """
    if intent.note_content is not None:
        author = intent.note_author or actor
        content = intent.note_content.strip()
    else:
        note = task.find_note(intent.note_id)
        author = note.author if note else actor
        content = note.content.strip() if note and note.content else ""
    return "\n".join(
        [
            NOTIFICATION_HEADER,
            f"📝 New note added to task {_label(intent, task)} by {_or(author)}:",
            "",
            _excerpt(content, note_excerpt_length) if content else NOTE_UNAVAILABLE,
        ]
    )


def _format_generic(intent: NotificationIntent, task: Task, actor: str | None) -> str:
    return "\n".join(
        [
            NOTIFICATION_HEADER,
            f"Task {_label(intent, task)} was updated by {_or(actor)}.",
        ]
    )


_FORMATTERS: dict[str, Callable[[NotificationIntent, Task, str | None], str]] = {
    NotificationKind.COMPLETION: format_completion,
    NotificationKind.ASSIGNMENT: format_assignment,
    NotificationKind.STATUS_CHANGE: format_status_change,
}


def format_notification(
    intent: NotificationIntent,
    task: Task,
    actor: str | None,
    *,
    note_excerpt_length: int = DEFAULT_NOTE_EXCERPT_LENGTH,
) -> str:
    """按通知类型分派到对应的格式化函数

    Args:
        intent: 通知意图
        task: 事件后的任务快照
        actor: 触发事件的身份

    Returns:
        通知文本（相同输入总是得到相同输出）
    """
    if intent.kind == NotificationKind.NOTE_ADDED:
        return format_note_added(
            intent, task, actor, note_excerpt_length=note_excerpt_length
        )
    formatter = _FORMATTERS.get(intent.kind, _format_generic)
    return formatter(intent, task, actor)
