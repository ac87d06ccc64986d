"""全局 pytest 配置 -- 任务 / 备注 / 事件构造 fixture"""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest
from taskrelay.core.models import Task, TaskNote

FIXED_TS = datetime(2025, 9, 22, 12, 0, tzinfo=UTC)


def build_task(**overrides) -> Task:
    """构造测试用 Task，字段可覆盖"""
    data = {
        "task_id": "t1",
        "title": "Fix bug",
        "status": "pending",
        "created_by": "A",
        "assigned_to": "B",
        "prompt": "Reproduce the crash and fix the null check",
        "priority": "medium",
        "notes": [],
        "created_at": FIXED_TS,
        "updated_at": FIXED_TS,
    }
    data.update(overrides)
    return Task(**data)


def build_note(author: str = "B", content: str = "", note_id: str = "note-1") -> TaskNote:
    """构造测试用 TaskNote"""
    return TaskNote(note_id=note_id, author=author, content=content, timestamp=FIXED_TS)


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Task 构造器"""
    return build_task


@pytest.fixture
def make_note() -> Callable[..., TaskNote]:
    """TaskNote 构造器"""
    return build_note


@pytest.fixture
def long_note_text() -> str:
    """超过默认阈值（50 字符）的备注正文"""
    return "I have completed the initial analysis and found several issues to address"
