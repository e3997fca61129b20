"""
内部诊断日志 - 加载器与占位符引擎的告警/错误出口

职责：
- 接收 (级别, 消息) 并转发到标准 logging
- 永不抛出异常（fire-and-forget）
"""

from __future__ import annotations

import logging
from enum import Enum


class Level(str, Enum):
    """诊断级别"""
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


_LOGGING_LEVELS = {
    Level.TRACE: 5,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


class InternalLogger:
    """诊断输出（默认写入 "tinyconf" logger）"""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("tinyconf")

    def log(self, level: Level, message: str) -> None:
        """记录一条诊断消息"""
        # logging 自身会吞掉 handler 异常并交给 Handler.handleError
        self.logger.log(_LOGGING_LEVELS[level], message)


# 进程默认诊断出口
internal_logger = InternalLogger()
