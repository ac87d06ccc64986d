"""AgentRegistry -- 身份 -> 接收方句柄

会话内活跃 agent 的登记表，get() 可直接作为 Router 的 lookup 使用。
"""

import structlog

from .exceptions import InvalidCollaboratorError, RecipientUnavailableError
from .protocols import RecipientHandle

log = structlog.get_logger()


class AgentRegistry:
    """活跃接收方登记表"""

    def __init__(self) -> None:
        self._handles: dict[str, RecipientHandle] = {}

    def register(self, identity: str, handle: RecipientHandle) -> None:
        """登记接收方，同一身份重复登记时覆盖旧句柄

        Raises:
            InvalidCollaboratorError: identity 为空或 handle 缺少 send_message
        """
        if not identity:
            raise InvalidCollaboratorError("identity 不能为空")
        if not callable(getattr(handle, "send_message", None)):
            raise InvalidCollaboratorError(f"接收方 {identity} 缺少可调用的 send_message")
        replaced = identity in self._handles
        self._handles[identity] = handle
        log.debug("recipient_registered", identity=identity, replaced=replaced)

    def unregister(self, identity: str) -> RecipientHandle | None:
        """注销接收方，返回被移除的句柄"""
        handle = self._handles.pop(identity, None)
        if handle is not None:
            log.debug("recipient_unregistered", identity=identity)
        return handle

    def get(self, identity: str | None) -> RecipientHandle | None:
        """解析身份，不可用时返回 None"""
        if not identity:
            return None
        return self._handles.get(identity)

    def require(self, identity: str) -> RecipientHandle:
        """解析身份，不可用时抛 RecipientUnavailableError"""
        handle = self.get(identity)
        if handle is None:
            raise RecipientUnavailableError(identity)
        return handle

    def identities(self) -> list[str]:
        return list(self._handles)

    def __contains__(self, identity: object) -> bool:
        return identity in self._handles

    def __len__(self) -> int:
        return len(self._handles)
