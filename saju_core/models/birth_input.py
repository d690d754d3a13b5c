#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
出生信息请求模型 - 字符串输入及格式校验

只校验格式；日期是否真实存在（如 2 月 30 日）由 BirthInputProcessor / 引擎判断。
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_DATE_PATTERN = re.compile(r'^\d{4}-\d{1,2}-\d{1,2}$')
_TIME_PATTERN = re.compile(r'^\d{1,2}:\d{2}$')


class BirthInputRequest(BaseModel):
    """出生信息请求"""
    birth_date: str = Field(..., description="出生日期，格式：YYYY-MM-DD（calendar_type=lunar 时为农历年月日）",
                            examples=["1971-11-17"])
    birth_time: str = Field("12:00", description="出生时间，格式：HH:MM", examples=["04:00"])
    calendar_type: Optional[str] = Field("solar", description="历法类型：solar(阳历) 或 lunar(农历)，默认solar")
    is_leap_month: bool = Field(False, description="农历闰月（仅 calendar_type=lunar 时有效）")
    summer_time: Optional[bool] = Field(None, description="夏令时校正：None=自动判断，True/False=强制")

    @field_validator('birth_date')
    @classmethod
    def validate_date(cls, v):
        """验证日期格式"""
        if not v or not _DATE_PATTERN.match(v.strip()):
            raise ValueError('日期格式错误，应为 YYYY-MM-DD')
        return v.strip()

    @field_validator('birth_time')
    @classmethod
    def validate_time(cls, v):
        """验证时间格式（范围由引擎校验）"""
        if not v or not _TIME_PATTERN.match(v.strip()):
            raise ValueError('时间格式错误，应为 HH:MM')
        return v.strip()

    @field_validator('calendar_type')
    @classmethod
    def validate_calendar_type(cls, v):
        """验证历法类型"""
        if v and v not in ['solar', 'lunar']:
            raise ValueError('历法类型必须为 solar 或 lunar')
        return v or "solar"

    def date_parts(self):
        year, month, day = (int(p) for p in self.birth_date.split('-'))
        return year, month, day

    def time_parts(self):
        hour, minute = (int(p) for p in self.birth_time.split(':'))
        return hour, minute
