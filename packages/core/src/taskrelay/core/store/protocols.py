"""Store Protocol 接口定义

使用 Python Protocol 实现结构化子类型（duck typing），
调用方可替换为任意满足接口的快照存储。
"""

from typing import Protocol

from ..models.task import Task


class SnapshotStore(Protocol):
    """任务快照存储接口（task_id -> 最近一次看到的 Task）

    由调用方持有并串行化访问；路由核心只读取"上一次快照"，从不写入。
    """

    def get(self, task_id: str) -> Task | None:
        """查询任务的上一次快照，未知任务返回 None"""
        ...

    def put(self, task: Task) -> None:
        """以事件后的任务快照替换旧快照"""
        ...

    def remove(self, task_id: str) -> Task | None:
        """移除快照，返回被移除的 Task"""
        ...

    def __len__(self) -> int: ...
