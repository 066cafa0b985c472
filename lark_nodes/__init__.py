# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：__init__.py
# @Date   ：2026/03/02 10:00
# @Author ：leemysw
# 2026/03/02 10:00   Create
# =====================================================
"""
[INPUT]: None
[OUTPUT]: 对外提供 __version__, LarkAuthenticationNode, LarkBaseNode
[POS]: 包入口
"""

__version__ = "0.1.0"

from lark_nodes.nodes import LarkAuthenticationNode, LarkBaseNode

__all__ = ["__version__", "LarkAuthenticationNode", "LarkBaseNode"]
