#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures
- 测试钩子
"""

import os
import sys

import pytest

# 添加项目根目录和 tests 目录到路径
tests_root = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.dirname(tests_root)
sys.path.insert(0, project_root)
sys.path.insert(0, tests_root)

from saju_core.calculators.four_pillars_engine import FourPillarsEngine  # noqa: E402
from saju_core.config.engine_config import EngineConfig  # noqa: E402
from saju_core.models.birth_moment import BirthMoment  # noqa: E402


# ==================== 引擎 Fixtures ====================

@pytest.fixture(scope="session")
def engine() -> FourPillarsEngine:
    """
    默认配置的排盘引擎（整个测试会话共享，引擎无状态）

    Returns:
        FourPillarsEngine 实例
    """
    return FourPillarsEngine(EngineConfig())


@pytest.fixture(scope="function")
def unchecked_config() -> EngineConfig:
    """关闭启动自检的配置，用于构造非默认引擎"""
    return EngineConfig(self_check_on_startup=False)


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def reference_moment() -> BirthMoment:
    """
    参考出生时刻：1971-11-17 04:00（신해 기해 병오 경인）

    Returns:
        BirthMoment
    """
    return BirthMoment(1971, 11, 17, 4, 0)


# ==================== Pytest Hooks ====================

def pytest_configure(config):
    """添加自定义标记说明"""
    config.addinivalue_line("markers", "slow: 标记为慢速测试，可通过 -m 'not slow' 跳过")
    config.addinivalue_line("markers", "unit: 单元测试")


def pytest_collection_modifyitems(config, items):
    """根据路径自动添加标记"""
    for item in items:
        if "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
