# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：console.py
# @Date   ：2026/03/02 10:05
# @Author ：leemysw
# 2026/03/02 10:05   Create
# =====================================================
"""
[INPUT]: 依赖 rich
[OUTPUT]: 对外提供 get_console, get_error_console
[POS]: 全局共享的 rich Console
"""

from typing import Optional

from rich.console import Console

_console: Optional[Console] = None
_error_console: Optional[Console] = None


def get_console() -> Console:
    """标准输出 Console"""
    global _console
    if _console is None:
        _console = Console(soft_wrap=True)
    return _console


def get_error_console() -> Console:
    """错误日志 Console，输出到 stderr，避免污染 JSON 输出"""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True, soft_wrap=True)
    return _error_console
