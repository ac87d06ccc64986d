"""NotificationIntent -- 分类器输出

Intent 创建后立即被 Formatter + Router 消费，不做持久化。
"""

from pydantic import BaseModel, ConfigDict, Field

from .enums import NotificationKind, PriorityHint


class NotificationIntent(BaseModel):
    """通知意图：决定"通知谁、通知什么"，尚未渲染和投递"""

    model_config = ConfigDict(frozen=True)

    target: str = Field(description="被通知的身份")
    kind: NotificationKind = Field(description="通知类型")
    task_id: str = Field(description="任务 ID")
    task_title: str = Field(description="任务标题")
    priority_hint: PriorityHint = Field(
        default=PriorityHint.BACKGROUND,
        description="投递顺序提示",
    )

    # 格式化上下文
    previous_status: str | None = Field(default=None, description="变更前状态")
    new_status: str | None = Field(default=None, description="变更后状态")
    previous_assignee: str | None = Field(default=None, description="变更前负责人")
    new_assignee: str | None = Field(default=None, description="变更后负责人")
    note_id: str | None = Field(default=None, description="触发通知的备注 ID")
    note_author: str | None = Field(default=None, description="触发通知的备注作者")
    note_content: str | None = Field(default=None, description="触发通知的备注内容")
    unassigned: bool = Field(
        default=False,
        description="True 表示 target 被改派，不再负责该任务",
    )
