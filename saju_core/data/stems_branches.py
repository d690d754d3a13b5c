#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干、地支与六十甲子表

这是全系统唯一的一份六十甲子表，所有计算器都从这里按索引取值，
不允许在其它模块重复定义或重新推导。
索引 0 = 갑자（甲子），按标准顺序排列到 59 = 계해（癸亥）。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Element(Enum):
    """五行"""
    WOOD = "wood"
    FIRE = "fire"
    EARTH = "earth"
    METAL = "metal"
    WATER = "water"


class Polarity(Enum):
    """阴阳"""
    YANG = "yang"
    YIN = "yin"


@dataclass(frozen=True)
class HeavenlyStem:
    index: int  # 0-9
    korean: str
    hanja: str
    element: Element
    polarity: Polarity

    def __str__(self):
        return self.korean


@dataclass(frozen=True)
class EarthlyBranch:
    index: int  # 0-11，同时是时辰桶序号
    korean: str
    hanja: str
    animal: str
    element: Element
    polarity: Polarity

    def __str__(self):
        return self.korean


@dataclass(frozen=True)
class StemBranchPair:
    """一柱：六十甲子环上的一个位置"""
    index: int  # 0-59
    stem: HeavenlyStem
    branch: EarthlyBranch

    @property
    def name(self) -> str:
        return f"{self.stem.korean}{self.branch.korean}"

    @property
    def hanja(self) -> str:
        return f"{self.stem.hanja}{self.branch.hanja}"

    def __str__(self):
        return self.name


# ==================== 天干地支定义 ====================

HEAVENLY_STEMS: Tuple[HeavenlyStem, ...] = (
    HeavenlyStem(0, "갑", "甲", Element.WOOD, Polarity.YANG),
    HeavenlyStem(1, "을", "乙", Element.WOOD, Polarity.YIN),
    HeavenlyStem(2, "병", "丙", Element.FIRE, Polarity.YANG),
    HeavenlyStem(3, "정", "丁", Element.FIRE, Polarity.YIN),
    HeavenlyStem(4, "무", "戊", Element.EARTH, Polarity.YANG),
    HeavenlyStem(5, "기", "己", Element.EARTH, Polarity.YIN),
    HeavenlyStem(6, "경", "庚", Element.METAL, Polarity.YANG),
    HeavenlyStem(7, "신", "辛", Element.METAL, Polarity.YIN),
    HeavenlyStem(8, "임", "壬", Element.WATER, Polarity.YANG),
    HeavenlyStem(9, "계", "癸", Element.WATER, Polarity.YIN),
)

EARTHLY_BRANCHES: Tuple[EarthlyBranch, ...] = (
    EarthlyBranch(0, "자", "子", "rat", Element.WATER, Polarity.YANG),
    EarthlyBranch(1, "축", "丑", "ox", Element.EARTH, Polarity.YIN),
    EarthlyBranch(2, "인", "寅", "tiger", Element.WOOD, Polarity.YANG),
    EarthlyBranch(3, "묘", "卯", "rabbit", Element.WOOD, Polarity.YIN),
    EarthlyBranch(4, "진", "辰", "dragon", Element.EARTH, Polarity.YANG),
    EarthlyBranch(5, "사", "巳", "snake", Element.FIRE, Polarity.YIN),
    EarthlyBranch(6, "오", "午", "horse", Element.FIRE, Polarity.YANG),
    EarthlyBranch(7, "미", "未", "goat", Element.EARTH, Polarity.YIN),
    EarthlyBranch(8, "신", "申", "monkey", Element.METAL, Polarity.YANG),
    EarthlyBranch(9, "유", "酉", "rooster", Element.METAL, Polarity.YIN),
    EarthlyBranch(10, "술", "戌", "dog", Element.EARTH, Polarity.YANG),
    EarthlyBranch(11, "해", "亥", "pig", Element.WATER, Polarity.YIN),
)

# 六十甲子：第 i 项的天干为 i % 10，地支为 i % 12
SEXAGENARY_CYCLE: Tuple[StemBranchPair, ...] = tuple(
    StemBranchPair(i, HEAVENLY_STEMS[i % 10], EARTHLY_BRANCHES[i % 12])
    for i in range(60)
)

# 韩文名 "갑자" -> 柱；天干 "신" 与地支 "신" 同名，因此天干/地支单独查找时要区分
_PAIR_BY_NAME: Dict[str, StemBranchPair] = {p.name: p for p in SEXAGENARY_CYCLE}
STEM_BY_KOREAN: Dict[str, HeavenlyStem] = {s.korean: s for s in HEAVENLY_STEMS}
BRANCH_BY_KOREAN: Dict[str, EarthlyBranch] = {b.korean: b for b in EARTHLY_BRANCHES}


# ==================== 查表函数 ====================

def pillar_at(index: int) -> StemBranchPair:
    """按环索引取柱（索引按 60 取模）"""
    return SEXAGENARY_CYCLE[index % 60]


def stem_at(index: int) -> HeavenlyStem:
    return HEAVENLY_STEMS[index % 10]


def branch_at(index: int) -> EarthlyBranch:
    return EARTHLY_BRANCHES[index % 12]


def pair_index(stem_index: int, branch_index: int) -> int:
    """
    由天干序号和地支序号求六十甲子索引

    阴阳必须一致（stem_index % 2 == branch_index % 2），否则这一组合不在环上。
    解同余方程 i ≡ stem (mod 10)、i ≡ branch (mod 12)，得 i = 6*stem - 5*branch (mod 60)。

    Raises:
        ValueError: 天干地支阴阳不一致
    """
    if stem_index % 2 != branch_index % 2:
        raise ValueError(f"天干 {stem_index} 与地支 {branch_index} 阴阳不一致，不构成甲子")
    return (6 * stem_index - 5 * branch_index) % 60


def pair_of(stem: HeavenlyStem, branch: EarthlyBranch) -> StemBranchPair:
    return SEXAGENARY_CYCLE[pair_index(stem.index, branch.index)]


def pillar_by_name(name: str) -> StemBranchPair:
    """按韩文名取柱，例如 pillar_by_name("병오")"""
    try:
        return _PAIR_BY_NAME[name]
    except KeyError:
        raise ValueError(f"未知的甲子名称: {name!r}") from None
