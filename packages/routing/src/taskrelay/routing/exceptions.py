"""Routing 异常体系

领域级失败（接收方不可用、投递失败）由 Router 结构化记录到 RoutingReport，
不向调用方抛出；只有协作方本身不合法（编程错误）才会抛出异常。
"""


class NotificationError(Exception):
    """Routing 包基础异常"""

    def __init__(self, message: str, recoverable: bool = True) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 是否可通过重试或稍后投递恢复
        """
        super().__init__(message)
        self.recoverable = recoverable


class DeliveryError(NotificationError):
    """通知投递失败

    由接收方适配器抛出，Router 捕获后记录为 failed。
    """

    def __init__(self, target: str, original_error: Exception | str) -> None:
        """
        Args:
            target: 投递目标身份
            original_error: 原始异常或错误描述
        """
        super().__init__(f"通知投递失败: {target} -- {original_error}", recoverable=True)
        self.target = target
        self.original_error = original_error


class RecipientUnavailableError(NotificationError):
    """接收方当前不可解析（离线或未知身份）

    Router 不抛出此异常（记录为 skipped），仅供 AgentRegistry.require 使用。
    """

    def __init__(self, target: str) -> None:
        super().__init__(f"接收方不可用: {target}", recoverable=True)
        self.target = target


class InvalidCollaboratorError(NotificationError, TypeError):
    """协作方不合法（lookup 不可调用、handle 缺少 send_message 等）

    属于编程错误，直接向调用方传播。
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, recoverable=False)
