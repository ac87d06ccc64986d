"""InMemorySnapshotStore -- 进程内任务快照存储"""

from ..models.task import Task


class InMemorySnapshotStore:
    """基于 dict 的快照存储

    存入时做深拷贝，避免调用方后续原地修改 Task 影响流转检测。
    """

    def __init__(self) -> None:
        self._snapshots: dict[str, Task] = {}

    def get(self, task_id: str) -> Task | None:
        return self._snapshots.get(task_id)

    def put(self, task: Task) -> None:
        self._snapshots[task.task_id] = task.model_copy(deep=True)

    def remove(self, task_id: str) -> Task | None:
        return self._snapshots.pop(task_id, None)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)
