#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""输入处理与日志工具"""
