"""Task Domain Model

Task 由外部任务管理器维护，本包只读取其快照。
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .enums import TaskPriority, TaskStatus


class TaskNote(BaseModel):
    """任务备注"""

    note_id: str = Field(description="备注 ID")
    author: str = Field(description="备注作者身份")
    content: str = Field(default="", description="备注正文")
    timestamp: datetime = Field(description="备注时间")


class Task(BaseModel):
    """Task 数据模型

    status 允许未知字符串，分类器对其按"无特殊流转"处理，不会抛异常。
    """

    task_id: str = Field(description="唯一标识，任务生命周期内稳定")
    title: str = Field(description="任务标题")
    status: TaskStatus | str = Field(default=TaskStatus.PENDING, description="当前状态")
    created_by: str = Field(description="创建者身份")
    assigned_to: str | None = Field(default=None, description="当前负责人身份")
    prompt: str = Field(default="", description="给负责人的任务说明")
    priority: TaskPriority | str = Field(
        default=TaskPriority.MEDIUM,
        description="优先级提示，仅用于消息展示",
    )
    notes: list[TaskNote] = Field(default_factory=list, description="按时间排序的备注")
    created_at: datetime = Field(description="创建时间")
    updated_at: datetime = Field(description="更新时间")

    def find_note(self, note_id: str | None) -> TaskNote | None:
        """按 note_id 查找备注，未找到返回 None"""
        if not note_id:
            return None
        for note in self.notes:
            if note.note_id == note_id:
                return note
        return None

    @property
    def latest_note(self) -> TaskNote | None:
        """最近一条备注"""
        return self.notes[-1] if self.notes else None
