"""集成测试共享 fixture"""

from dataclasses import dataclass, field
from typing import Any

import pytest
from taskrelay.routing import AgentRegistry, TaskNotificationService


@dataclass
class InboxAgent:
    """把收到的通知追加到 inbox 的测试 agent"""

    identity: str
    inbox: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    async def send_message(self, text: str, *, metadata: dict[str, Any]) -> None:
        self.inbox.append((text, metadata))

    @property
    def texts(self) -> list[str]:
        return [text for text, _ in self.inbox]


@pytest.fixture
def agents() -> dict[str, InboxAgent]:
    """A 创建者，B/C 执行者"""
    return {identity: InboxAgent(identity) for identity in ("A", "B", "C")}


@pytest.fixture
def registry(agents) -> AgentRegistry:
    registry = AgentRegistry()
    for identity, agent in agents.items():
        registry.register(identity, agent)
    return registry


@pytest.fixture
def service(registry) -> TaskNotificationService:
    """使用 registry.get 作为 lookup 的通知服务"""
    return TaskNotificationService(registry.get)
