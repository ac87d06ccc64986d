"""Routing 包测试 fixtures"""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def recipient() -> MagicMock:
    """send_message 成功的接收方"""
    handle = MagicMock()
    handle.send_message = AsyncMock(return_value=None)
    return handle


@pytest.fixture
def recipients() -> dict[str, MagicMock]:
    """按身份区分的接收方集合（A 创建者、B/C 负责人）"""
    handles = {}
    for identity in ("A", "B", "C"):
        handle = MagicMock()
        handle.send_message = AsyncMock(return_value=None)
        handles[identity] = handle
    return handles


@pytest.fixture
def lookup(recipients):
    """在 recipients 中解析身份，未知身份返回 None"""
    return recipients.get
