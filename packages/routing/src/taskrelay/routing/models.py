"""数据模型 -- RoutingEntry + RoutingReport

RoutingReport 返回给调用方用于日志与可观测性，不做持久化。
"""

from pydantic import BaseModel, Field
from taskrelay.core.models import DeliveryOutcome, LifecycleEventKind, NotificationIntent


class RoutingEntry(BaseModel):
    """单条通知意图的处理结果"""

    intent: NotificationIntent = Field(description="通知意图")
    outcome: DeliveryOutcome = Field(description="delivered / skipped / failed")
    detail: str = Field(default="", description="skipped/failed 的原因说明")
    message: str = Field(default="", description="渲染后的通知文本")


class RoutingReport(BaseModel):
    """一次 route 调用的汇总报告

    entries 顺序与分类器输出顺序一致。
    """

    report_id: str = Field(description="报告 ID，ULID 格式")
    task_id: str = Field(description="任务 ID")
    event_kind: LifecycleEventKind = Field(description="触发的生命周期事件类型")
    actor: str = Field(default="", description="触发事件的身份")
    entries: list[RoutingEntry] = Field(default_factory=list, description="逐条处理结果")

    def _with_outcome(self, outcome: DeliveryOutcome) -> list[RoutingEntry]:
        return [entry for entry in self.entries if entry.outcome == outcome]

    @property
    def delivered(self) -> list[RoutingEntry]:
        return self._with_outcome(DeliveryOutcome.DELIVERED)

    @property
    def skipped(self) -> list[RoutingEntry]:
        return self._with_outcome(DeliveryOutcome.SKIPPED)

    @property
    def failed(self) -> list[RoutingEntry]:
        return self._with_outcome(DeliveryOutcome.FAILED)

    @property
    def has_problems(self) -> bool:
        """存在 skipped 或 failed 条目"""
        return any(entry.outcome != DeliveryOutcome.DELIVERED for entry in self.entries)
