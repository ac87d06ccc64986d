"""AgentRegistry 单元测试"""

import pytest
from taskrelay.routing.exceptions import (
    InvalidCollaboratorError,
    NotificationError,
    RecipientUnavailableError,
)
from taskrelay.routing.registry import AgentRegistry


class TestAgentRegistry:
    def test_register_and_get(self, recipient):
        registry = AgentRegistry()
        registry.register("A", recipient)

        assert registry.get("A") is recipient
        assert "A" in registry
        assert len(registry) == 1
        assert registry.identities() == ["A"]

    def test_unknown_or_empty_identity_returns_none(self, recipient):
        """未知身份、空身份都解析为 None"""
        registry = AgentRegistry()
        registry.register("A", recipient)

        assert registry.get("B") is None
        assert registry.get("") is None
        assert registry.get(None) is None

    def test_register_replaces_existing_handle(self, recipients):
        """同一身份重复登记时覆盖"""
        registry = AgentRegistry()
        registry.register("A", recipients["A"])
        registry.register("A", recipients["B"])

        assert registry.get("A") is recipients["B"]
        assert len(registry) == 1

    def test_unregister(self, recipient):
        registry = AgentRegistry()
        registry.register("A", recipient)

        assert registry.unregister("A") is recipient
        assert registry.unregister("A") is None
        assert "A" not in registry

    def test_require_raises_for_missing(self, recipient):
        """require 对不可用身份抛 RecipientUnavailableError"""
        registry = AgentRegistry()
        registry.register("A", recipient)

        assert registry.require("A") is recipient
        with pytest.raises(RecipientUnavailableError) as exc_info:
            registry.require("Z")
        assert exc_info.value.target == "Z"
        assert exc_info.value.recoverable is True

    def test_register_rejects_handle_without_send_message(self):
        registry = AgentRegistry()
        with pytest.raises(InvalidCollaboratorError) as exc_info:
            registry.register("A", object())
        assert exc_info.value.recoverable is False
        assert isinstance(exc_info.value, NotificationError)

    def test_register_rejects_empty_identity(self, recipient):
        with pytest.raises(InvalidCollaboratorError):
            AgentRegistry().register("", recipient)
