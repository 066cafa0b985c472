# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：errors.py
# @Date   ：2026/03/02 10:10
# @Author ：leemysw
# 2026/03/02 10:10   Create
# =====================================================
"""
[INPUT]: None
[OUTPUT]: 对外提供 LarkNodeError 及其子类
[POS]: 统一异常定义

三类错误：
- 参数/配置错误：LarkValidationError, MissingTokenError
- 传输错误：LarkTransportError
- 远端错误：LarkAPIError, RecordNotFoundError
"""

from typing import Any, Dict, Optional


class LarkNodeError(RuntimeError):
    """所有节点错误的基类"""


class LarkValidationError(LarkNodeError):
    """参数校验失败，发生在任何网络请求之前"""


class MissingTokenError(LarkValidationError):
    """输入数据中没有 tenant_access_token"""


class LarkTransportError(LarkNodeError):
    """网络层失败（DNS、连接、超时）"""


class LarkAPIError(LarkNodeError):
    """接口返回 HTTP 错误状态，或响应 code 非 0"""

    def __init__(
            self,
            message: str,
            code: Optional[int] = None,
            msg: Optional[str] = None,
            status_code: Optional[int] = None,
            payload: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.msg = msg
        self.status_code = status_code
        self.payload = payload


class RecordNotFoundError(LarkAPIError):
    """删除时记录不存在 (HTTP 404)"""
