#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置管理单元测试
测试环境变量配置和日志级别
"""

import logging
import os
from unittest.mock import patch

import pytest

from saju_core.config.engine_config import EngineConfig, get_config, reload_config
from saju_core.utils.saju_logging import LOGGER_NAME, set_log_level


class TestEngineConfig:
    """配置测试类"""

    def test_config_defaults(self):
        """测试配置默认值"""
        with patch.dict(os.environ, {}, clear=True):
            config = EngineConfig.from_env()

            assert config.time_correction_minutes == 30
            assert config.solar_term_table_path is None
            assert config.self_check_on_startup is True
            assert config.max_workers == min((os.cpu_count() or 4) * 2, 16)

    def test_config_from_env(self):
        """测试从环境变量创建配置"""
        with patch.dict(os.environ, {
            'SAJU_TIME_CORRECTION_MINUTES': '0',
            'SAJU_SOLAR_TERM_TABLE': '/tmp/terms.json',
            'SAJU_SELF_CHECK': 'false',
            'SAJU_MAX_WORKERS': '3',
        }):
            config = EngineConfig.from_env()

            assert config.time_correction_minutes == 0
            assert config.solar_term_table_path == '/tmp/terms.json'
            assert config.self_check_on_startup is False
            assert config.max_workers == 3

    def test_bad_int_falls_back_to_default(self):
        """测试非整数环境变量回退默认值"""
        with patch.dict(os.environ, {'SAJU_MAX_WORKERS': 'abc'}, clear=True):
            assert EngineConfig.from_env().max_workers == min((os.cpu_count() or 4) * 2, 16)

    def test_empty_table_path_means_builtin(self):
        with patch.dict(os.environ, {'SAJU_SOLAR_TERM_TABLE': ''}, clear=True):
            assert EngineConfig.from_env().solar_term_table_path is None

    @pytest.mark.parametrize("kwargs", [
        {'time_correction_minutes': 721},
        {'time_correction_minutes': -721},
        {'max_workers': 0},
    ])
    def test_invalid_values_rejected(self, kwargs):
        """测试非法配置值"""
        with pytest.raises(ValueError):
            EngineConfig(**kwargs)

    def test_invalid_env_value_rejected(self):
        with patch.dict(os.environ, {'SAJU_TIME_CORRECTION_MINUTES': '900'}, clear=True):
            with pytest.raises(ValueError):
                EngineConfig.from_env()

    def test_reload_config(self):
        """测试配置重载"""
        try:
            with patch.dict(os.environ, {'SAJU_MAX_WORKERS': '2'}):
                config = reload_config()
                assert config.max_workers == 2
                assert get_config() is config
        finally:
            reload_config()


class TestLogging:

    def test_set_log_level(self):
        logger = logging.getLogger(LOGGER_NAME)
        original = logger.level
        try:
            set_log_level('DEBUG')
            assert logger.level == logging.DEBUG
            set_log_level('not-a-level')
            assert logger.level == logging.INFO
        finally:
            logger.setLevel(original)

    def test_module_loggers_share_parent(self):
        child = logging.getLogger('saju_core.calculators.four_pillars_engine')
        assert child.parent is logging.getLogger(LOGGER_NAME)

    def test_level_comes_from_environment_only(self):
        with patch.dict(os.environ, {'SAJU_LOG_LEVEL': 'DEBUG'}):
            config = EngineConfig.from_env()
        assert not hasattr(config, 'log_level')
