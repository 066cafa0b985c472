# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：__init__.py
# @Date   ：2026/03/02 18:30
# @Author ：leemysw
# 2026/03/02 18:30   Create
# =====================================================
"""
[INPUT]: None
[OUTPUT]: 对外提供 TenantAuthenticator
[POS]: auth 模块入口
"""

from lark_nodes.auth.tenant import TenantAuthenticator

__all__ = ["TenantAuthenticator"]
