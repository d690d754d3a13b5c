#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱排盘异常定义

所有错误只在引擎边界（输入校验）抛出，四个柱计算器本身没有错误路径。
"""

from typing import Optional


class SajuError(Exception):
    """
    排盘异常基类

    与业务异常保持相同结构：message / code / error_type。
    """
    def __init__(self, message: str, code: int = 400, error_type: str = "saju_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class InvalidDateError(SajuError):
    """日期不是有效的公历（或农历）日期，例如 2 月 30 日"""
    def __init__(self, message: str, year: Optional[int] = None,
                 month: Optional[int] = None, day: Optional[int] = None):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(message, code=400, error_type="invalid_date")


class UnsupportedInputError(SajuError):
    """输入超出定义域，或仍标记为农历"""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        error_type = f"unsupported_input:{field}" if field else "unsupported_input"
        super().__init__(message, code=400, error_type=error_type)


class SelfCheckError(SajuError):
    """启动自检失败：基准日或参考用例无法复现"""
    def __init__(self, message: str):
        super().__init__(message, code=500, error_type="self_check_failed")
