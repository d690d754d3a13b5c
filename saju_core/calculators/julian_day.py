#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
儒略日数（JDN）换算

公历（含 1582 年以前的外推公历）日期 -> 连续整数日数，作为日柱取模运算的桥梁。
纯整数运算，定义域两端无界。
"""


def to_julian_day_number(year: int, month: int, day: int) -> int:
    """
    公历日期转儒略日数

    Args:
        year: 公历年（可为 0 或负数，外推公历）
        month: 1-12
        day: 当月有效日期

    Returns:
        int: 儒略日数，例如 2000-01-01 -> 2451545
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def is_leap_year(year: int) -> bool:
    """闰年：能被 4 整除但不能被 100 整除，或能被 400 整除"""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def is_valid_gregorian_date(year: int, month: int, day: int) -> bool:
    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)
