# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：tenant
# @Date   ：2026/3/2 19:03
# @Author ：leemysw
#
# 2026/3/2 19:03   Create
# =====================================================

from typing import Optional

import httpx

from lark_nodes.core.sdk.base import FEISHU_BASE_URL, LARK_BASE_URL, JSON_HEADERS
from lark_nodes.errors import LarkAPIError, LarkTransportError


# ==============================================================================
# Tenant Access Token 认证器
# ==============================================================================
class TenantAuthenticator:
    """
    Lark Tenant Access Token 认证器

    使用自建应用的 app_id 和 app_secret 直接获取 tenant_access_token。

    特点：
    - 每次调用都会重新请求，不缓存、不刷新、不跟踪过期时间
    - 失败不重试，直接抛出异常

    使用示例：
        auth = TenantAuthenticator(app_id="xxx", app_secret="xxx")
        token = auth.get_token()
    """

    TOKEN_PATH = "/open-apis/auth/v3/tenant_access_token/internal"

    def __init__(
            self,
            app_id: str,
            app_secret: str,
            is_feishu: bool = False,
            client: Optional[httpx.Client] = None,
    ):
        """
        初始化认证器

        Args:
            app_id: 应用 App ID
            app_secret: 应用 App Secret
            is_feishu: 是否使用飞书 (国内版)，默认 Lark
            client: 外部传入的 httpx 客户端
        """
        self.app_id = app_id
        self.app_secret = app_secret
        self.is_feishu = is_feishu

        base_url = FEISHU_BASE_URL if is_feishu else LARK_BASE_URL
        self.token_url = base_url + self.TOKEN_PATH

        self._client = client or httpx.Client()

    def get_token(self) -> str:
        """获取 tenant_access_token"""
        return self.fetch()["tenant_access_token"]

    def fetch(self) -> dict:
        """
        请求 token 接口，返回完整响应

        Returns:
            {"code": 0, "msg": "ok", "tenant_access_token": "...", "expire": 7200}
        """
        try:
            response = self._client.post(
                self.token_url,
                headers=JSON_HEADERS,
                json={
                    "app_id": self.app_id,
                    "app_secret": self.app_secret,
                },
            )
        except httpx.TransportError as e:
            raise LarkTransportError(f"Failed to get tenant_access_token: {e}") from e

        try:
            data = response.json()
        except ValueError:
            raise LarkAPIError(
                f"Failed to get tenant_access_token: HTTP {response.status_code}",
                status_code=response.status_code,
            ) from None

        if not isinstance(data, dict):
            raise LarkAPIError(
                f"Failed to get tenant_access_token: unexpected response {response.text[:200]}",
                status_code=response.status_code,
            )

        if data.get("code") != 0 or not data.get("tenant_access_token"):
            raise LarkAPIError(
                f"Failed to get tenant_access_token: {data.get('msg') or 'Unknown error'}",
                code=data.get("code"),
                msg=data.get("msg"),
                status_code=response.status_code,
                payload=data,
            )

        return data

    def close(self) -> None:
        self._client.close()
