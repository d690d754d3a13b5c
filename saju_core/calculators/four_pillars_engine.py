#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱排盘引擎 - 对外唯一入口

计算顺序固定：日柱 -> 年柱 -> 月柱（用年干）-> 时柱（用日干）。
年柱岁首取节气分界表中的立春日期，年柱与月柱始终以同一分界切换。
所有输入校验在任何计算器运行之前完成；校验通过后计算是全函数，没有副作用，
可以在任意线程中并发调用。
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from saju_core.calculators.day_pillar import day_pillar, day_pillar_index
from saju_core.calculators.hour_pillar import hour_pillar
from saju_core.calculators.julian_day import days_in_month
from saju_core.calculators.month_pillar import month_pillar
from saju_core.calculators.year_pillar import year_pillar
from saju_core.config.engine_config import EngineConfig, get_config
from saju_core.data.solar_terms import DEFAULT_SOLAR_TERM_TABLE, SolarTermBoundaryTable
from saju_core.data.stems_branches import pillar_at
from saju_core.data.tables import (
    DAY_ANCHOR_DATE,
    DAY_ANCHOR_INDEX,
    REFERENCE_CHARTS,
    TABLE_VERSION,
    YEAR_ANCHOR,
    YEAR_ANCHOR_INDEX,
)
from saju_core.exceptions import InvalidDateError, SelfCheckError, UnsupportedInputError
from saju_core.models.birth_moment import BirthMoment
from saju_core.models.four_pillars import FourPillars
from saju_core.utils import saju_logging  # noqa: F401  初始化 saju_core 日志器

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class FourPillarsEngine:
    """
    四柱排盘引擎

    Args:
        config: 引擎配置，默认读取环境变量
        boundary_table: 节气分界表，优先于 config.solar_term_table_path
    """

    def __init__(self, config: Optional[EngineConfig] = None,
                 boundary_table: Optional[SolarTermBoundaryTable] = None) -> None:
        self.config = config or get_config()

        if boundary_table is not None:
            self.boundary_table = boundary_table
        elif self.config.solar_term_table_path:
            self.boundary_table = SolarTermBoundaryTable.from_json(self.config.solar_term_table_path)
        else:
            self.boundary_table = DEFAULT_SOLAR_TERM_TABLE

        if self.config.self_check_on_startup:
            self.self_check()

    # === 公开方法 ==================================================================================

    def compute(self, birth_moment: BirthMoment) -> FourPillars:
        """
        计算四柱

        Args:
            birth_moment: 公历出生时刻（is_lunar 必须为 False）

        Returns:
            FourPillars: 不可变的四柱结果

        Raises:
            UnsupportedInputError: 仍标记为农历，或字段超出定义域
            InvalidDateError: 日期不是真实的公历日期
        """
        self.validate(birth_moment)

        bm = birth_moment
        day = day_pillar(bm.year, bm.month, bm.day)
        year = year_pillar(bm.year, bm.month, bm.day, self.boundary_table.year_cutoff_day)
        month = month_pillar(bm.year, bm.month, bm.day, year.stem, self.boundary_table)
        hour = hour_pillar(day.stem, bm.hour, bm.minute, self.config.time_correction_minutes)

        result = FourPillars(year=year, month=month, day=day, hour=hour, birth_moment=bm)
        logger.debug(f"排盘完成: {bm} -> {result.render()}")
        return result

    def compute_many(self, birth_moments: Iterable[BirthMoment],
                     max_workers: Optional[int] = None) -> List[FourPillars]:
        """
        批量计算（线程池），结果顺序与输入一致

        任一输入不合法时抛出该输入的异常。
        """
        moments = list(birth_moments)
        if not moments:
            return []

        workers = max_workers or self.config.max_workers
        logger.info(f"批量排盘: {len(moments)} 条 (max_workers={workers})")
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="saju_engine") as executor:
            return list(executor.map(self.compute, moments))

    @staticmethod
    def validate(birth_moment: BirthMoment) -> None:
        """入口校验：先检查农历标记和各字段定义域，再检查日期是否真实存在"""
        bm = birth_moment
        if bm.is_lunar:
            logger.warning(f"拒绝未转换的农历输入: {bm}")
            raise UnsupportedInputError("农历日期必须先转换为公历再排盘", field="is_lunar")

        for field_name in ('year', 'month', 'day', 'hour', 'minute'):
            if not _is_int(getattr(bm, field_name)):
                raise UnsupportedInputError(
                    f"{field_name} 必须为整数: {getattr(bm, field_name)!r}", field=field_name
                )

        if not 1 <= bm.month <= 12:
            raise UnsupportedInputError(f"月份超出范围 1-12: {bm.month}", field="month")
        if not 0 <= bm.hour <= 23:
            raise UnsupportedInputError(f"小时超出范围 0-23: {bm.hour}", field="hour")
        if not 0 <= bm.minute <= 59:
            raise UnsupportedInputError(f"分钟超出范围 0-59: {bm.minute}", field="minute")

        if not 1 <= bm.day <= days_in_month(bm.year, bm.month):
            logger.warning(f"无效公历日期: {bm.year}-{bm.month}-{bm.day}")
            raise InvalidDateError(
                f"无效的公历日期: {bm.year:04d}-{bm.month:02d}-{bm.day:02d}",
                year=bm.year, month=bm.month, day=bm.day,
            )

    def self_check(self) -> None:
        """
        启动自检：基准日、基准年和参考四柱必须能复现，否则拒绝启动

        Raises:
            SelfCheckError: 任一检查不一致
        """
        anchor = DAY_ANCHOR_DATE
        anchor_index = day_pillar_index(anchor.year, anchor.month, anchor.day)
        if anchor_index != DAY_ANCHOR_INDEX:
            raise SelfCheckError(
                f"日柱基准不一致: {anchor.isoformat()} 计算为 {anchor_index}，应为 {DAY_ANCHOR_INDEX}"
            )

        anchor_year = year_pillar(YEAR_ANCHOR, 6, 1, self.boundary_table.year_cutoff_day)
        if anchor_year.index != YEAR_ANCHOR_INDEX:
            raise SelfCheckError(
                f"年柱基准不一致: {YEAR_ANCHOR} 年计算为 {anchor_year.name}，"
                f"应为 {pillar_at(YEAR_ANCHOR_INDEX).name}"
            )

        for (y, m, d, hh, mm), expected in REFERENCE_CHARTS:
            actual = self.compute(BirthMoment(y, m, d, hh, mm)).render()
            if actual != expected:
                raise SelfCheckError(
                    f"参考四柱不一致: {y:04d}-{m:02d}-{d:02d} {hh:02d}:{mm:02d} "
                    f"计算为 {actual}，应为 {expected}"
                )

        logger.info(f"✓ 四柱引擎自检通过 (tables {TABLE_VERSION})")


# ==================== 便捷函数 ====================

_engine: Optional[FourPillarsEngine] = None


def get_engine() -> FourPillarsEngine:
    """获取默认引擎（单例，按全局配置创建）"""
    global _engine
    if _engine is None:
        _engine = FourPillarsEngine()
    return _engine


def compute(birth_moment: BirthMoment) -> FourPillars:
    """使用默认引擎排盘"""
    return get_engine().compute(birth_moment)
