"""NotificationConfig -- 通知路由配置加载

从环境变量加载配置，无效值记录 warning 后回退到默认值，不阻塞启动。
"""

import os
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

DEFAULT_NOTE_MIN_LENGTH = 50
DEFAULT_NOTE_EXCERPT_LENGTH = 500


class NotificationConfig(BaseModel):
    """通知路由配置

    环境变量:
        TASKRELAY_NOTE_MIN_LENGTH: 备注触发通知的最小长度（默认 50）
        TASKRELAY_NOTE_EXCERPT_LENGTH: 通知中备注摘录的最大长度（默认 500）
        TASKRELAY_DELIVERY_MODE: 投递模式 sequential / concurrent
        TASKRELAY_DELIVERY_TIMEOUT_S: 单次投递超时（秒，默认不限制）
    """

    note_min_length: int = Field(
        default=DEFAULT_NOTE_MIN_LENGTH,
        ge=0,
        description="备注长度需超过此值才通知创建者（策略性阈值）",
    )
    note_excerpt_length: int = Field(
        default=DEFAULT_NOTE_EXCERPT_LENGTH,
        ge=1,
        description="通知中备注摘录的最大字符数",
    )
    delivery_mode: Literal["sequential", "concurrent"] = Field(
        default="sequential",
        description="投递模式：按分类器顺序串行 / 并发扇出",
    )
    delivery_timeout_s: float | None = Field(
        default=None,
        gt=0,
        description="单次投递超时（秒），None 表示不限制",
    )


def _read_int(env_var: str, fallback: int, minimum: int) -> int | None:
    """读取整数环境变量，缺失或无效时返回 None"""
    val = os.environ.get(env_var)
    if not val:
        return None
    try:
        parsed = int(val)
    except ValueError:
        parsed = None
    if parsed is None or parsed < minimum:
        log.warning(
            "invalid_notification_config",
            env_var=env_var,
            value=val,
            fallback=fallback,
        )
        return None
    return parsed


def load_notification_config() -> NotificationConfig:
    """从环境变量加载通知路由配置

    环境变量映射:
        TASKRELAY_NOTE_MIN_LENGTH -> note_min_length (默认 50)
        TASKRELAY_NOTE_EXCERPT_LENGTH -> note_excerpt_length (默认 500)
        TASKRELAY_DELIVERY_MODE -> delivery_mode (默认 "sequential")
        TASKRELAY_DELIVERY_TIMEOUT_S -> delivery_timeout_s (默认 None)

    Returns:
        NotificationConfig 实例
    """
    kwargs: dict = {}

    min_length = _read_int("TASKRELAY_NOTE_MIN_LENGTH", DEFAULT_NOTE_MIN_LENGTH, 0)
    if min_length is not None:
        kwargs["note_min_length"] = min_length

    excerpt_length = _read_int(
        "TASKRELAY_NOTE_EXCERPT_LENGTH", DEFAULT_NOTE_EXCERPT_LENGTH, 1
    )
    if excerpt_length is not None:
        kwargs["note_excerpt_length"] = excerpt_length

    if val := os.environ.get("TASKRELAY_DELIVERY_MODE"):
        if val in ("sequential", "concurrent"):
            kwargs["delivery_mode"] = val
        else:
            log.warning(
                "invalid_notification_config",
                env_var="TASKRELAY_DELIVERY_MODE",
                value=val,
                fallback="sequential",
            )

    if val := os.environ.get("TASKRELAY_DELIVERY_TIMEOUT_S"):
        try:
            timeout = float(val)
        except ValueError:
            timeout = None
        if timeout is not None and timeout > 0:
            kwargs["delivery_timeout_s"] = timeout
        else:
            log.warning(
                "invalid_notification_config",
                env_var="TASKRELAY_DELIVERY_TIMEOUT_S",
                value=val,
                fallback=None,
            )

    return NotificationConfig(**kwargs)
