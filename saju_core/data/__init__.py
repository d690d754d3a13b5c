#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘静态数据

- 六十甲子表与天干地支
- 五虎遁 / 五鼠遁表与基准点
- 节气分界表
"""

from .stems_branches import (
    Element,
    Polarity,
    HeavenlyStem,
    EarthlyBranch,
    StemBranchPair,
    HEAVENLY_STEMS,
    EARTHLY_BRANCHES,
    SEXAGENARY_CYCLE,
    pillar_at,
    stem_at,
    branch_at,
    pair_index,
    pair_of,
    pillar_by_name,
)
from .solar_terms import (
    SolarTermBoundary,
    SolarTermBoundaryTable,
    DEFAULT_SOLAR_TERM_TABLE,
)
from .tables import TABLE_VERSION

__all__ = [
    'Element',
    'Polarity',
    'HeavenlyStem',
    'EarthlyBranch',
    'StemBranchPair',
    'HEAVENLY_STEMS',
    'EARTHLY_BRANCHES',
    'SEXAGENARY_CYCLE',
    'pillar_at',
    'stem_at',
    'branch_at',
    'pair_index',
    'pair_of',
    'pillar_by_name',
    'SolarTermBoundary',
    'SolarTermBoundaryTable',
    'DEFAULT_SOLAR_TERM_TABLE',
    'TABLE_VERSION',
]
