"""TaskRelay Routing -- 任务通知路由

packages/routing 的公开接口导出。
"""

# 分类与格式化
from .classifier import classify

# 配置
from .config import NotificationConfig, load_notification_config

# 异常
from .exceptions import (
    DeliveryError,
    InvalidCollaboratorError,
    NotificationError,
    RecipientUnavailableError,
)
from .formatter import (
    format_assignment,
    format_completion,
    format_note_added,
    format_notification,
    format_status_change,
)

# 数据模型
from .models import RoutingEntry, RoutingReport
from .protocols import RecipientHandle, RecipientLookup

# 核心组件
from .registry import AgentRegistry
from .router import NotificationRouter, route_task_notifications
from .service import TaskNotificationService

__all__ = [
    "classify",
    "format_notification",
    "format_completion",
    "format_assignment",
    "format_status_change",
    "format_note_added",
    "RoutingEntry",
    "RoutingReport",
    "RecipientHandle",
    "RecipientLookup",
    "NotificationRouter",
    "route_task_notifications",
    "AgentRegistry",
    "TaskNotificationService",
    "NotificationConfig",
    "load_notification_config",
    "NotificationError",
    "DeliveryError",
    "RecipientUnavailableError",
    "InvalidCollaboratorError",
]
