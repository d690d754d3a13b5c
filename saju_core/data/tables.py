#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘静态表（版本化）

- 年干起月表（五虎遁）
- 日干起时表（五鼠遁）
- 月支顺序（寅月起）
- 日柱 / 年柱基准点

修改任何一张表都必须同步提升 TABLE_VERSION，并保证自检（FourPillarsEngine.self_check）通过。
"""

from datetime import date
from typing import Dict, Tuple

TABLE_VERSION = "2024.1"

# ==================== 基准点 ====================

# 日柱基准：1900-01-01 = 갑술（甲戌）日，六十甲子索引 10
# 以 1971-11-17 = 병오、1976-09-16 = 신미 两个实测日柱反推验证
DAY_ANCHOR_DATE = date(1900, 1, 1)
DAY_ANCHOR_INDEX = 10

# 年柱基准：1984 年 = 갑자（甲子）年
YEAR_ANCHOR = 1984
YEAR_ANCHOR_INDEX = 0

# ==================== 五虎遁：年干 -> 12 个月干（寅月起） ====================
# 갑기년 병인두, 을경년 무인두, 병신년 경인두, 정임년 임인두, 무계년 갑인두

YEAR_STEM_TO_MONTH_STEMS: Dict[str, Tuple[str, ...]] = {
    '갑': ('병', '정', '무', '기', '경', '신', '임', '계', '갑', '을', '병', '정'),
    '을': ('무', '기', '경', '신', '임', '계', '갑', '을', '병', '정', '무', '기'),
    '병': ('경', '신', '임', '계', '갑', '을', '병', '정', '무', '기', '경', '신'),
    '정': ('임', '계', '갑', '을', '병', '정', '무', '기', '경', '신', '임', '계'),
    '무': ('갑', '을', '병', '정', '무', '기', '경', '신', '임', '계', '갑', '을'),
    '기': ('병', '정', '무', '기', '경', '신', '임', '계', '갑', '을', '병', '정'),
    '경': ('무', '기', '경', '신', '임', '계', '갑', '을', '병', '정', '무', '기'),
    '신': ('경', '신', '임', '계', '갑', '을', '병', '정', '무', '기', '경', '신'),
    '임': ('임', '계', '갑', '을', '병', '정', '무', '기', '경', '신', '임', '계'),
    '계': ('갑', '을', '병', '정', '무', '기', '경', '신', '임', '계', '갑', '을'),
}

# 节气月 1..12 对应的月支：寅卯辰巳午未申酉戌亥子丑（固定，不随年变化）
MONTH_BRANCHES: Tuple[str, ...] = ('인', '묘', '진', '사', '오', '미', '신', '유', '술', '해', '자', '축')

# ==================== 五鼠遁：日干 -> 12 个时干（子时起） ====================
# 갑기일 갑자시, 을경일 병자시, 병신일 무자시, 정임일 경자시, 무계일 임자시

DAY_STEM_TO_HOUR_STEMS: Dict[str, Tuple[str, ...]] = {
    '갑': ('갑', '을', '병', '정', '무', '기', '경', '신', '임', '계', '갑', '을'),
    '을': ('병', '정', '무', '기', '경', '신', '임', '계', '갑', '을', '병', '정'),
    '병': ('무', '기', '경', '신', '임', '계', '갑', '을', '병', '정', '무', '기'),
    '정': ('경', '신', '임', '계', '갑', '을', '병', '정', '무', '기', '경', '신'),
    '무': ('임', '계', '갑', '을', '병', '정', '무', '기', '경', '신', '임', '계'),
    '기': ('갑', '을', '병', '정', '무', '기', '경', '신', '임', '계', '갑', '을'),
    '경': ('병', '정', '무', '기', '경', '신', '임', '계', '갑', '을', '병', '정'),
    '신': ('무', '기', '경', '신', '임', '계', '갑', '을', '병', '정', '무', '기'),
    '임': ('경', '신', '임', '계', '갑', '을', '병', '정', '무', '기', '경', '신'),
    '계': ('임', '계', '갑', '을', '병', '정', '무', '기', '경', '신', '임', '계'),
}

# ==================== 参考用例（自检与回归测试共用） ====================
# (year, month, day, hour, minute) -> 年 月 日 时

REFERENCE_CHARTS: Tuple[Tuple[Tuple[int, int, int, int, int], str], ...] = (
    ((1971, 11, 17, 4, 0), "신해 기해 병오 경인"),
    ((1976, 9, 16, 9, 40), "병진 정유 신미 계사"),
)
