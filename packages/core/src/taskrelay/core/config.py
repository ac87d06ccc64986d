"""配置常量模块 -- 可通过环境变量覆盖

包含通知来源标识、消息头、标题截断长度等常量。
路由行为相关的可调参数见 taskrelay.routing.config。
"""

import os

# 投递 metadata 中的来源标识
NOTIFICATION_SOURCE: str = "task_system"

# 所有通知消息的首行，便于 agent 区分系统通知与用户消息
NOTIFICATION_HEADER: str = os.environ.get("TASKRELAY_NOTIFICATION_HEADER", "[TASK SYSTEM]")

# 日志中任务标题的截断长度
TITLE_PREVIEW_LENGTH: int = 100
