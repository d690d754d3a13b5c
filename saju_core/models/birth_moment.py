#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""出生时刻"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class BirthMoment:
    """
    出生时刻（公历）

    构造时不做校验，校验统一在 FourPillarsEngine.compute() 入口进行。
    is_lunar=True 的输入必须先经过农历转换（见 BirthInputProcessor），引擎会拒绝。
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    is_lunar: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BirthMoment":
        return cls(
            year=int(data['year']),
            month=int(data['month']),
            day=int(data['day']),
            hour=int(data.get('hour', 0)),
            minute=int(data.get('minute', 0)),
            is_lunar=bool(data.get('is_lunar', False)),
        )

    def __str__(self):
        calendar = "lunar" if self.is_lunar else "solar"
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d} {self.hour:02d}:{self.minute:02d} ({calendar})"
