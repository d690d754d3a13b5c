#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱结果

一次计算生成一个不可变的 FourPillars，输入变化时重新生成，不做原地修改。
持久化格式：四组 (stem_index 0-9, branch_index 0-11) 加原始出生时刻，
可据此审计或重新计算。
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from saju_core.data.stems_branches import StemBranchPair, pair_index, pillar_at
from saju_core.models.birth_moment import BirthMoment

PILLAR_POSITIONS: Tuple[str, ...] = ('year', 'month', 'day', 'hour')


@dataclass(frozen=True)
class FourPillars:
    year: StemBranchPair
    month: StemBranchPair
    day: StemBranchPair
    hour: StemBranchPair
    birth_moment: BirthMoment

    @property
    def pillars(self) -> Tuple[StemBranchPair, StemBranchPair, StemBranchPair, StemBranchPair]:
        return (self.year, self.month, self.day, self.hour)

    @property
    def day_master(self):
        """日主（日柱天干）"""
        return self.day.stem

    def render(self) -> str:
        """韩文四柱，例如 "신해 기해 병오 경인" """
        return " ".join(p.name for p in self.pillars)

    def render_hanja(self) -> str:
        return " ".join(p.hanja for p in self.pillars)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            position: {
                'stem_index': pillar.stem.index,
                'branch_index': pillar.branch.index,
            }
            for position, pillar in zip(PILLAR_POSITIONS, self.pillars)
        }
        data['birth_moment'] = self.birth_moment.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FourPillars":
        """
        从持久化格式恢复

        Raises:
            ValueError: 缺少字段、索引越界或天干地支阴阳不一致
        """
        pillars = {}
        for position in PILLAR_POSITIONS:
            try:
                stem_index = int(data[position]['stem_index'])
                branch_index = int(data[position]['branch_index'])
            except (KeyError, TypeError) as e:
                raise ValueError(f"{position} 柱数据缺失: {e}") from e
            if not 0 <= stem_index <= 9 or not 0 <= branch_index <= 11:
                raise ValueError(f"{position} 柱索引越界: ({stem_index}, {branch_index})")
            pillars[position] = pillar_at(pair_index(stem_index, branch_index))

        return cls(birth_moment=BirthMoment.from_dict(data['birth_moment']), **pillars)

    def __str__(self):
        return self.render()
