#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
saju_core - 四柱（사주）排盘核心

用法：
    from saju_core import BirthMoment, compute
    compute(BirthMoment(1971, 11, 17, 4, 0)).render()  # '신해 기해 병오 경인'
"""

from saju_core.calculators.four_pillars_engine import FourPillarsEngine, compute, get_engine
from saju_core.config.engine_config import EngineConfig
from saju_core.exceptions import InvalidDateError, SajuError, SelfCheckError, UnsupportedInputError
from saju_core.models.birth_moment import BirthMoment
from saju_core.models.four_pillars import FourPillars

__version__ = "1.0.0"

__all__ = [
    'FourPillarsEngine',
    'compute',
    'get_engine',
    'EngineConfig',
    'BirthMoment',
    'FourPillars',
    'SajuError',
    'InvalidDateError',
    'UnsupportedInputError',
    'SelfCheckError',
]
