#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘模块共享日志配置

saju_core 下各模块使用 logging.getLogger(__name__)，统一挂在 "saju_core" 日志器下。
"""

import logging
import os

LOGGER_NAME = "saju_core"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SafeStreamHandler(logging.StreamHandler):
    """安全的 StreamHandler，捕获 Broken pipe 异常"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


def _resolve_level(level) -> int:
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else logging.INFO


logger = logging.getLogger(LOGGER_NAME)
if not logger.handlers:
    handler = SafeStreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(os.getenv('SAJU_LOG_LEVEL', 'INFO')))


def set_log_level(level: str) -> None:
    """调整 saju_core 日志级别（DEBUG/INFO/WARNING/ERROR），未知级别按 INFO 处理"""
    logger.setLevel(_resolve_level(level))
