# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：main.py
# @Date   ：2026/3/6 00:00
# @Author ：leemysw
#
# 2026/3/6 00:00   Create
# =====================================================

from lark_nodes.cli.main import app

if __name__ == '__main__':
    app()
