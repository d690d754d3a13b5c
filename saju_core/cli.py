#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行排盘

用法：
    saju-chart --date 1971-11-17 --time 04:00
    saju-chart --date 2024-01-01 --time 12:00 --calendar lunar --json
"""

import argparse
import json
import sys

from pydantic import ValidationError

from saju_core.calculators.four_pillars_engine import FourPillarsEngine
from saju_core.config.engine_config import get_config
from saju_core.exceptions import SajuError
from saju_core.models.birth_input import BirthInputRequest
from saju_core.utils.birth_input_processor import BirthInputProcessor
from saju_core.utils.saju_logging import set_log_level

_SUMMER_TIME_CHOICES = {"auto": None, "on": True, "off": False}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="saju-chart", description="计算四柱（사주）")
    parser.add_argument("--date", required=True, help="出生日期 YYYY-MM-DD")
    parser.add_argument("--time", default="12:00", help="出生时间 HH:MM，默认 12:00")
    parser.add_argument("--calendar", default="solar", choices=["solar", "lunar"])
    parser.add_argument("--leap-month", action="store_true", dest="leap_month", help="农历闰月")
    parser.add_argument("--summer-time", default="auto", choices=list(_SUMMER_TIME_CHOICES),
                        dest="summer_time", help="夏令时校正，默认自动判断")
    parser.add_argument("--json", action="store_true", help="输出 JSON")
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="日志级别 DEBUG/INFO/WARNING/ERROR，默认取 SAJU_LOG_LEVEL")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        set_log_level(args.log_level)

    try:
        engine = FourPillarsEngine(get_config())
    except (OSError, ValueError, SajuError) as e:
        # 配置或节气分界表文件有误，或自检失败
        print(f"配置错误: {e}", file=sys.stderr)
        return 2

    try:
        request = BirthInputRequest(
            birth_date=args.date,
            birth_time=args.time,
            calendar_type=args.calendar,
            is_leap_month=args.leap_month,
            summer_time=_SUMMER_TIME_CHOICES[args.summer_time],
        )
        birth_moment, conversion_info = BirthInputProcessor.process_input(request)
        result = engine.compute(birth_moment)
    except ValidationError as e:
        print(f"输入格式错误: {e.errors()[0]['msg']}", file=sys.stderr)
        return 2
    except SajuError as e:
        print(f"无法排盘: {e.message}", file=sys.stderr)
        return 2

    if args.json:
        output = result.to_dict()
        output['rendered'] = result.render()
        output['hanja'] = result.render_hanja()
        output['conversion_info'] = conversion_info
        print(json.dumps(output, ensure_ascii=False, indent=2))
    else:
        print(result.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
