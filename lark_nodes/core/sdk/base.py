# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：base.py
# @Date   ：2026/03/02 15:10
# @Author ：leemysw
# 2026/03/02 15:10   Create - SDK 基础类
# 2026/03/04 11:30   Refactor - 改为直接使用 httpx 发请求
# =====================================================
"""
[INPUT]: 依赖 httpx
[OUTPUT]: 对外提供 SDKCore, SubModule, LARK_BASE_URL, FEISHU_BASE_URL
[POS]: SDK 核心类和子模块基类
"""

import json
from typing import Any, Dict, Optional

import httpx
from rich.markup import escape

from lark_nodes.errors import LarkAPIError, LarkNodeError, LarkTransportError
from lark_nodes.utils.console import get_error_console

console = get_error_console()

LARK_BASE_URL = "https://open.larksuite.com"
FEISHU_BASE_URL = "https://open.feishu.cn"

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class SDKCore:
    """
    SDK 核心类

    持有共享资源：httpx client、base url
    子模块通过组合方式访问这些资源
    """

    def __init__(
            self,
            base_url: str = LARK_BASE_URL,
            client: Optional[httpx.Client] = None,
            timeout: Optional[float] = None,
    ):
        """
        初始化 SDK 核心

        Args:
            base_url: 开放平台域名
            client: 外部传入的 httpx 客户端（测试时注入 MockTransport）
            timeout: 请求超时，None 时使用 httpx 默认值
        """
        self.base_url = base_url.rstrip("/")
        if client is None:
            client = httpx.Client(timeout=timeout) if timeout is not None else httpx.Client()
        self.client = client

    @staticmethod
    def build_headers(access_token: str) -> Dict[str, str]:
        """构建请求头，所有业务请求都携带 Bearer token"""
        return {"Authorization": f"Bearer {access_token}", **JSON_HEADERS}

    def request(
            self,
            method: str,
            path: str,
            access_token: str,
            params: Optional[Dict[str, Any]] = None,
            json_body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        发送一次请求并返回响应 JSON

        Raises:
            LarkTransportError: 网络层失败
            LarkAPIError: HTTP 错误状态或响应不是 JSON
        """
        try:
            response = self.client.request(
                method,
                self.base_url + path,
                params=params,
                json=json_body,
                headers=self.build_headers(access_token),
            )
        except httpx.TransportError as e:
            raise LarkTransportError(f"{method} {path} failed: {e}") from e

        try:
            envelope = response.json()
        except ValueError:
            envelope = None

        if response.is_error:
            msg = envelope.get("msg") if isinstance(envelope, dict) else None
            raise LarkAPIError(
                f"Request failed with status code {response.status_code}"
                + (f": {msg}" if msg else ""),
                code=envelope.get("code") if isinstance(envelope, dict) else None,
                msg=msg,
                status_code=response.status_code,
                payload=envelope if isinstance(envelope, dict) else None,
            )

        if not isinstance(envelope, dict):
            raise LarkAPIError(
                f"Unexpected response from {path}: {response.text[:200]}",
                status_code=response.status_code,
            )

        return envelope

    @staticmethod
    def log_error(api_name: str, error: LarkNodeError):
        """统一错误日志"""
        lines = [f"[red]API 调用失败: {api_name}[/red]", f"  error: {escape(str(error))}"]
        if isinstance(error, LarkAPIError):
            if error.status_code is not None:
                lines.append(f"  status: {error.status_code}")
            if error.code is not None:
                lines.append(f"  code: {error.code}")
            if error.payload:
                lines.append(f"  response: {escape(json.dumps(error.payload, indent=2, ensure_ascii=False))}")
        console.print("\n".join(lines), highlight=False)


class SubModule:
    """
    子模块基类

    所有功能模块继承此类，通过 core 访问共享资源
    """

    def __init__(self, core: SDKCore):
        self._core = core

    def _request(self, method: str, path: str, access_token: str, **kwargs) -> Dict[str, Any]:
        return self._core.request(method, path, access_token, **kwargs)