"""packages/core 测试配置 -- 核心层 fixture"""

import pytest
from taskrelay.core.store import InMemorySnapshotStore


@pytest.fixture
def snapshot_store() -> InMemorySnapshotStore:
    """空的进程内快照存储"""
    return InMemorySnapshotStore()
