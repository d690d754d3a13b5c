#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
年柱计算

以立春为岁首：1 月，或 2 月且早于分界日（默认 4 日）的日期属于上一年。
"""

from saju_core.data.stems_branches import StemBranchPair, pillar_at
from saju_core.data.tables import YEAR_ANCHOR, YEAR_ANCHOR_INDEX

DEFAULT_YEAR_CUTOFF_DAY = 4


def effective_year(year: int, month: int, day: int, cutoff_day: int = DEFAULT_YEAR_CUTOFF_DAY) -> int:
    """立春前出生按上一年计"""
    if month == 1 or (month == 2 and day < cutoff_day):
        return year - 1
    return year


def year_pillar(year: int, month: int, day: int, cutoff_day: int = DEFAULT_YEAR_CUTOFF_DAY) -> StemBranchPair:
    """
    计算年柱

    Args:
        year, month, day: 公历日期
        cutoff_day: 2 月的岁首分界日

    Returns:
        StemBranchPair: 年柱，例如 1984-02-04 -> 갑자
    """
    diff = effective_year(year, month, day, cutoff_day) - YEAR_ANCHOR
    return pillar_at(YEAR_ANCHOR_INDEX + (diff % 60 + 60) % 60)
