#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""四柱排盘数据模型"""

from .birth_moment import BirthMoment
from .four_pillars import FourPillars, PILLAR_POSITIONS
from .birth_input import BirthInputRequest

__all__ = [
    'BirthMoment',
    'FourPillars',
    'PILLAR_POSITIONS',
    'BirthInputRequest',
]
