#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
节气分界表（近似）

每个节气月的起始日用固定的 (公历月, 日) 表示，不随年份变化。
真实节气时刻每年浮动约 1 天，因此在分界日附近可能有 1 天误差。
表可以通过 JSON 文件替换（见 EngineConfig.solar_term_table_path），
月柱算法只依赖 solar_month_of() 这一接口。
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Iterable, List, Tuple, Union

logger = logging.getLogger(__name__)

# 各月最大天数（2 月按闰年 29 天校验）
_MAX_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class SolarTermBoundary:
    """一个节气月的起点"""
    solar_month: int  # 1=인(寅) ... 12=축(丑)
    month: int
    day: int
    name: str = ""


class SolarTermBoundaryTable:
    """
    节气分界表

    Args:
        boundaries: 12 个 SolarTermBoundary，每个节气月恰好一个

    Raises:
        ValueError: 条目数量、日期或顺序不合法
    """

    def __init__(self, boundaries: Iterable[SolarTermBoundary]):
        entries = sorted(boundaries, key=lambda b: (b.month, b.day))
        self._validate(entries)
        self._entries: Tuple[SolarTermBoundary, ...] = tuple(entries)

    @staticmethod
    def _validate(entries: List[SolarTermBoundary]) -> None:
        if len(entries) != 12:
            raise ValueError(f"节气分界表必须有 12 项，实际 {len(entries)} 项")

        solar_months = sorted(e.solar_month for e in entries)
        if solar_months != list(range(1, 13)):
            raise ValueError(f"节气月必须恰好覆盖 1..12，实际 {solar_months}")

        seen = set()
        for e in entries:
            if not 1 <= e.month <= 12 or not 1 <= e.day <= _MAX_DAYS[e.month - 1]:
                raise ValueError(f"节气分界日期无效: {e.month}-{e.day} ({e.name})")
            if (e.month, e.day) in seen:
                raise ValueError(f"节气分界日期重复: {e.month}-{e.day}")
            seen.add((e.month, e.day))

        # 按公历顺序排列后，节气月必须逐一递增（12 之后回到 1）
        for prev, cur in zip(entries, entries[1:] + entries[:1]):
            if cur.solar_month != prev.solar_month % 12 + 1:
                raise ValueError(
                    f"节气月顺序错误: {prev.name or prev.solar_month} 之后是 {cur.name or cur.solar_month}"
                )

        # 年柱按“1 月或 2 月分界日前属上一年”计算，岁首必须与立春分界重合
        ipchun = next(e for e in entries if e.solar_month == 1)
        if ipchun.month != 2:
            raise ValueError(f"立春（节气月 1）必须在 2 月: {ipchun.month}-{ipchun.day}")

    @property
    def entries(self) -> Tuple[SolarTermBoundary, ...]:
        return self._entries

    @property
    def year_cutoff_day(self) -> int:
        """岁首分界日：立春所在的 2 月日期"""
        return self.boundary_for(1).day

    def solar_month_of(self, month: int, day: int) -> int:
        """
        求公历 (month, day) 所属的节气月（1..12）

        取公历顺序中最后一个不晚于该日期的分界；若该日期早于全年第一个分界
        （例如 1 月 1 日早于小寒），则属于上一年最后一个分界（大雪）所在的节气月。
        """
        current = self._entries[-1]
        for entry in self._entries:
            if (entry.month, entry.day) <= (month, day):
                current = entry
            else:
                break
        return current.solar_month

    def boundary_for(self, solar_month: int) -> SolarTermBoundary:
        for entry in self._entries:
            if entry.solar_month == solar_month:
                return entry
        raise ValueError(f"节气月超出范围: {solar_month}")

    def to_list(self) -> List[dict]:
        return [asdict(e) for e in self._entries]

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "SolarTermBoundaryTable":
        """
        从 JSON 文件加载分界表

        文件格式：[{"solar_month": 1, "month": 2, "day": 4, "name": "입춘"}, ...]
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)

        if not isinstance(raw, list):
            raise ValueError(f"节气分界表文件格式错误（应为列表）: {path}")

        try:
            boundaries = [
                SolarTermBoundary(
                    solar_month=int(item['solar_month']),
                    month=int(item['month']),
                    day=int(item['day']),
                    name=str(item.get('name', '')),
                )
                for item in raw
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"节气分界表条目格式错误: {e}") from e

        table = cls(boundaries)
        logger.info(f"✓ 已加载节气分界表: {path}")
        return table

    def __eq__(self, other):
        if not isinstance(other, SolarTermBoundaryTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self):
        return hash(self._entries)

    def __repr__(self):
        return f"SolarTermBoundaryTable({len(self._entries)} entries)"


# 默认表：每个“节”（月首节气）的常见公历日期
DEFAULT_SOLAR_TERM_TABLE = SolarTermBoundaryTable([
    SolarTermBoundary(12, 1, 6, "소한"),   # 小寒 -> 축월
    SolarTermBoundary(1, 2, 4, "입춘"),    # 立春 -> 인월
    SolarTermBoundary(2, 3, 6, "경칩"),    # 惊蛰 -> 묘월
    SolarTermBoundary(3, 4, 5, "청명"),    # 清明 -> 진월
    SolarTermBoundary(4, 5, 6, "입하"),    # 立夏 -> 사월
    SolarTermBoundary(5, 6, 6, "망종"),    # 芒种 -> 오월
    SolarTermBoundary(6, 7, 7, "소서"),    # 小暑 -> 미월
    SolarTermBoundary(7, 8, 8, "입추"),    # 立秋 -> 신월
    SolarTermBoundary(8, 9, 8, "백로"),    # 白露 -> 유월
    SolarTermBoundary(9, 10, 8, "한로"),   # 寒露 -> 술월
    SolarTermBoundary(10, 11, 7, "입동"),  # 立冬 -> 해월
    SolarTermBoundary(11, 12, 7, "대설"),  # 大雪 -> 자월
])
