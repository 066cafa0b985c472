# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：__init__.py
# @Date   ：2026/03/02 15:24
# @Author ：leemysw
# 2026/03/02 15:24   Create
# =====================================================
"""
[INPUT]: 依赖各子模块
[OUTPUT]: 对外提供 LarkSDK 类
[POS]: SDK 模块入口，使用组合模式组织各功能模块
"""

from typing import Optional

import httpx

from .base import FEISHU_BASE_URL, LARK_BASE_URL, SDKCore
from .bitable import BitableRecordAPI

__all__ = ["LarkSDK", "LARK_BASE_URL", "FEISHU_BASE_URL"]


class LarkSDK:
    """
    Lark 开放平台 API 封装

    通过属性访问功能模块：
    - sdk.bitable - 多维表格记录

    Usage:
        sdk = LarkSDK()
        sdk.bitable.list_records(app_token, table_id, access_token, limit=20)
    """

    def __init__(
            self,
            base_url: str = LARK_BASE_URL,
            client: Optional[httpx.Client] = None,
            timeout: Optional[float] = None,
    ):
        self._core = SDKCore(base_url=base_url, client=client, timeout=timeout)
        self._bitable: Optional[BitableRecordAPI] = None

    # =========================================================================
    # 子模块（延迟初始化）
    # =========================================================================

    @property
    def bitable(self) -> BitableRecordAPI:
        if self._bitable is None:
            self._bitable = BitableRecordAPI(self._core)
        return self._bitable

    def log_error(self, api_name: str, error) -> None:
        self._core.log_error(api_name, error)

    def close(self) -> None:
        self._core.client.close()
