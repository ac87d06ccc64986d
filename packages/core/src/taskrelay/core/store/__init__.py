"""TaskRelay Core Store -- 任务快照存储"""

from .protocols import SnapshotStore
from .snapshot_store import InMemorySnapshotStore

__all__ = [
    "SnapshotStore",
    "InMemorySnapshotStore",
]
