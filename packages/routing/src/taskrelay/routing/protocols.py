"""协作方 Protocol 接口定义

RecipientHandle 由外部 agent / 消息组件提供；
RecipientLookup 把身份解析为当前可用的 RecipientHandle。
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol


class RecipientHandle(Protocol):
    """通知接收方

    send_message 可以是协程函数，也可以是普通函数；
    抛出的任何异常都会被 Router 记录为 failed。
    """

    def send_message(
        self,
        text: str,
        *,
        metadata: dict[str, Any],
    ) -> Awaitable[None] | None:
        """投递一条通知"""
        ...


# lookup 可同步返回，也可返回 awaitable；None 表示接收方不可用
RecipientLookup = Callable[
    [str],
    RecipientHandle | None | Awaitable[RecipientHandle | None],
]
