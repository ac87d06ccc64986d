"""TaskNotificationService -- 会话侧通知编排

持有任务快照存储与接收方 lookup，把任务管理器发出的生命周期事件交给 Router：
1. 读取该任务的上一次快照
2. Router 路由并投递通知
3. 记录 skipped / failed 条目
4. 用事件后的任务快照替换旧快照（路由失败时同样更新）
5. 任务进入终态后移除快照与 task 级别锁，避免存储无限增长

同一任务的事件通过 task 级别锁串行处理，保证快照读写与事件到达顺序一致；
不同任务之间并发处理。
"""

import asyncio

import structlog
from taskrelay.core.models import Task, TaskLifecycleEvent, is_terminal
from taskrelay.core.store import InMemorySnapshotStore, SnapshotStore

from .config import NotificationConfig, load_notification_config
from .models import RoutingReport
from .protocols import RecipientLookup
from .router import NotificationRouter

log = structlog.get_logger()


class TaskNotificationService:
    """任务通知业务服务"""

    def __init__(
        self,
        lookup: RecipientLookup,
        snapshot_store: SnapshotStore | None = None,
        router: NotificationRouter | None = None,
        config: NotificationConfig | None = None,
    ) -> None:
        self._lookup = lookup
        self._snapshots = snapshot_store if snapshot_store is not None else InMemorySnapshotStore()
        self._router = router or NotificationRouter(config or load_notification_config())
        self._task_locks: dict[str, asyncio.Lock] = {}
        self._task_locks_guard = asyncio.Lock()

    @property
    def snapshots(self) -> SnapshotStore:
        return self._snapshots

    async def handle_event(self, event: TaskLifecycleEvent) -> RoutingReport | None:
        """处理一个生命周期事件

        通知失败不能影响任务本身的更新流程：路由异常只记录日志，返回 None。

        Args:
            event: 任务管理器发出的生命周期事件

        Returns:
            RoutingReport；路由过程抛出异常时返回 None
        """
        task = event.task
        task_id = task.task_id
        terminal = is_terminal(task.status)
        lock = await self._get_task_lock(task_id)
        async with lock:
            previous_task = self._snapshots.get(task_id)
            try:
                report = await self._router.route(event, previous_task, self._lookup)
            except Exception as e:
                log.error(
                    "task_notification_failed",
                    task_id=task_id,
                    event_kind=event.kind,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                report = None
            finally:
                if terminal:
                    self._snapshots.remove(task_id)
                else:
                    self._snapshots.put(task)
        if terminal:
            await self._cleanup_task_lock(task_id)

        if report is not None:
            self._log_problems(report)
        return report

    def seed(self, task: Task) -> None:
        """登记已知任务快照，不触发通知（例如会话恢复时加载已有任务）"""
        self._snapshots.put(task)

    async def forget(self, task_id: str) -> Task | None:
        """移除任务快照及其空闲的 task 级别锁"""
        await self._cleanup_task_lock(task_id)
        return self._snapshots.remove(task_id)

    async def _get_task_lock(self, task_id: str) -> asyncio.Lock:
        """获取 task 级别锁，序列化同一任务的事件处理。"""
        async with self._task_locks_guard:
            lock = self._task_locks.get(task_id)
            if lock is None:
                lock = asyncio.Lock()
                self._task_locks[task_id] = lock
            return lock

    async def _cleanup_task_lock(self, task_id: str) -> None:
        """任务终态或被移除后清理空闲 lock，避免字典无限增长。"""
        async with self._task_locks_guard:
            lock = self._task_locks.get(task_id)
            if lock is not None and not lock.locked():
                self._task_locks.pop(task_id, None)

    @staticmethod
    def _log_problems(report: RoutingReport) -> None:
        for entry in report.skipped + report.failed:
            log.warning(
                "task_notification_not_delivered",
                report_id=report.report_id,
                task_id=report.task_id,
                target=entry.intent.target,
                kind=entry.intent.kind,
                outcome=entry.outcome,
                detail=entry.detail,
            )
