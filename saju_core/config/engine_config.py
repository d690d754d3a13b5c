#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘引擎配置

所有配置统一从环境变量读取：

- SAJU_TIME_CORRECTION_MINUTES  时柱时间校正分钟数，默认 30
- SAJU_SOLAR_TERM_TABLE         节气分界表 JSON 文件路径，默认使用内置表
- SAJU_SELF_CHECK               引擎创建时是否自检，默认 true
- SAJU_MAX_WORKERS              批量计算线程数，默认 CPU 核心数 * 2（最大 16）

日志级别由 SAJU_LOG_LEVEL 控制，见 saju_core.utils.saju_logging。
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


def _get_bool(key: str, default: bool) -> bool:
    value = os.getenv(key, str(default)).lower()
    return value in ("true", "1", "yes", "on")


def _get_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"⚠️ 环境变量 {key}={value!r} 不是整数，使用默认值 {default}")
        return default


def _default_max_workers() -> int:
    return min((os.cpu_count() or 4) * 2, 16)


@dataclass(frozen=True)
class EngineConfig:
    """排盘引擎配置"""
    time_correction_minutes: int = 30
    solar_term_table_path: Optional[str] = None
    self_check_on_startup: bool = True
    max_workers: int = 8

    def __post_init__(self):
        if not -720 <= self.time_correction_minutes <= 720:
            raise ValueError(f"time_correction_minutes 必须在 ±720 之间: {self.time_correction_minutes}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers 必须大于 0: {self.max_workers}")

    @classmethod
    def from_env(cls) -> 'EngineConfig':
        """从环境变量创建配置"""
        return cls(
            time_correction_minutes=_get_int('SAJU_TIME_CORRECTION_MINUTES', 30),
            solar_term_table_path=os.getenv('SAJU_SOLAR_TERM_TABLE') or None,
            self_check_on_startup=_get_bool('SAJU_SELF_CHECK', True),
            max_workers=_get_int('SAJU_MAX_WORKERS', _default_max_workers()),
        )


# 全局配置实例（单例模式）
_config: Optional[EngineConfig] = None


def get_config() -> EngineConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def reload_config() -> EngineConfig:
    """重新加载配置"""
    global _config
    _config = EngineConfig.from_env()
    return _config
