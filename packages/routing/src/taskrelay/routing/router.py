"""NotificationRouter -- 通知路由与投递

流程：
1. Classifier 计算通知意图
2. Formatter 渲染通知文本
3. lookup 解析接收方；None 记录为 skipped（接收方不可用）
4. 调用接收方 send_message 投递；异常按意图捕获，记录为 failed

每条意图每次调用至多投递一次，不做内部重试。
单条意图的失败不影响同批次其他意图。
"""

import asyncio
import inspect
from typing import Any

import structlog
from taskrelay.core.config import NOTIFICATION_SOURCE, TITLE_PREVIEW_LENGTH
from taskrelay.core.models import (
    DeliveryOutcome,
    NotificationIntent,
    Task,
    TaskLifecycleEvent,
)
from ulid import ULID

from .classifier import classify
from .config import NotificationConfig
from .exceptions import InvalidCollaboratorError
from .formatter import format_notification
from .models import RoutingEntry, RoutingReport
from .protocols import RecipientLookup

log = structlog.get_logger()

RECIPIENT_UNAVAILABLE = "recipient unavailable"


class NotificationRouter:
    """通知路由器

    投递模式:
        sequential（默认）: 按分类器输出顺序逐条投递，顺序确定
        concurrent: 扇出投递后等待全部结果，单条失败不取消其他投递
    """

    def __init__(self, config: NotificationConfig | None = None) -> None:
        self._config = config or NotificationConfig()

    @property
    def config(self) -> NotificationConfig:
        return self._config

    async def route(
        self,
        event: TaskLifecycleEvent,
        previous_task: Task | None,
        lookup: RecipientLookup,
    ) -> RoutingReport:
        """路由一个生命周期事件产生的全部通知

        Args:
            event: 生命周期事件
            previous_task: 调用方持有的上一次任务快照，未知时为 None
            lookup: 身份 -> RecipientHandle | None

        Returns:
            RoutingReport，entries 与分类器输出顺序一致

        Raises:
            InvalidCollaboratorError: lookup 不可调用，或接收方缺少可调用的 send_message
        """
        if not callable(lookup):
            raise InvalidCollaboratorError(
                f"lookup 必须可调用，实际为 {type(lookup).__name__}"
            )

        task = event.task
        intents = classify(
            event,
            previous_task,
            note_min_length=self._config.note_min_length,
        )

        if self._config.delivery_mode == "concurrent" and len(intents) > 1:
            results = await asyncio.gather(
                *(self._dispatch(intent, event, lookup) for intent in intents),
                return_exceptions=True,
            )
            # 全部投递结束后再抛出协作方错误
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            entries = list(results)
        else:
            entries = [await self._dispatch(intent, event, lookup) for intent in intents]

        report = RoutingReport(
            report_id=str(ULID()),
            task_id=task.task_id,
            event_kind=event.kind,
            actor=event.actor,
            entries=entries,
        )
        log.info(
            "task_notifications_routed",
            report_id=report.report_id,
            task_id=task.task_id,
            title=task.title[:TITLE_PREVIEW_LENGTH],
            event_kind=event.kind,
            intents=len(intents),
            delivered=len(report.delivered),
            skipped=len(report.skipped),
            failed=len(report.failed),
        )
        return report

    async def _dispatch(
        self,
        intent: NotificationIntent,
        event: TaskLifecycleEvent,
        lookup: RecipientLookup,
    ) -> RoutingEntry:
        """处理单条意图：渲染 -> 解析接收方 -> 投递"""
        message = format_notification(
            intent,
            event.task,
            event.actor,
            note_excerpt_length=self._config.note_excerpt_length,
        )

        try:
            handle = lookup(intent.target)
            if inspect.isawaitable(handle):
                handle = await handle
        except Exception as e:
            log.warning(
                "notification_lookup_failed",
                task_id=intent.task_id,
                target=intent.target,
                kind=intent.kind,
                error=str(e),
            )
            return RoutingEntry(
                intent=intent,
                outcome=DeliveryOutcome.FAILED,
                detail=f"lookup failed: {_describe(e)}",
                message=message,
            )

        if handle is None:
            log.warning(
                "notification_recipient_unavailable",
                task_id=intent.task_id,
                target=intent.target,
                kind=intent.kind,
            )
            return RoutingEntry(
                intent=intent,
                outcome=DeliveryOutcome.SKIPPED,
                detail=RECIPIENT_UNAVAILABLE,
                message=message,
            )

        send = getattr(handle, "send_message", None)
        if not callable(send):
            raise InvalidCollaboratorError(
                f"接收方 {intent.target} 缺少可调用的 send_message"
            )

        try:
            await self._deliver(send, message, self._build_metadata(intent))
        except Exception as e:
            log.warning(
                "notification_delivery_failed",
                task_id=intent.task_id,
                target=intent.target,
                kind=intent.kind,
                error=str(e),
            )
            return RoutingEntry(
                intent=intent,
                outcome=DeliveryOutcome.FAILED,
                detail=_describe(e),
                message=message,
            )

        log.debug(
            "notification_delivered",
            task_id=intent.task_id,
            target=intent.target,
            kind=intent.kind,
        )
        return RoutingEntry(
            intent=intent,
            outcome=DeliveryOutcome.DELIVERED,
            message=message,
        )

    async def _deliver(self, send, message: str, metadata: dict[str, Any]) -> None:
        result = send(message, metadata=metadata)
        if not inspect.isawaitable(result):
            return
        timeout = self._config.delivery_timeout_s
        if timeout is None:
            await result
            return
        try:
            await asyncio.wait_for(result, timeout=timeout)
        except TimeoutError as e:
            raise TimeoutError(f"delivery timed out after {timeout}s") from e

    @staticmethod
    def _build_metadata(intent: NotificationIntent) -> dict[str, Any]:
        return {
            "source": NOTIFICATION_SOURCE,
            "queue": True,
            "notification_kind": str(intent.kind),
            "priority_hint": str(intent.priority_hint),
            "task_id": intent.task_id,
        }


def _describe(error: Exception) -> str:
    text = str(error)
    return f"{type(error).__name__}: {text}" if text else type(error).__name__


async def route_task_notifications(
    event: TaskLifecycleEvent,
    previous_task: Task | None,
    lookup: RecipientLookup,
    *,
    config: NotificationConfig | None = None,
) -> RoutingReport:
    """函数式入口：用给定配置构造 Router 并路由一次事件"""
    return await NotificationRouter(config).route(event, previous_task, lookup)
