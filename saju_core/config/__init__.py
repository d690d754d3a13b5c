#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""配置管理模块"""

from .engine_config import EngineConfig, get_config, reload_config

__all__ = ['EngineConfig', 'get_config', 'reload_config']
