# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：authentication.py
# @Date   ：2026/03/03 14:00
# @Author ：leemysw
# 2026/03/03 14:00   Create
# =====================================================
"""
[INPUT]: 依赖 lark_nodes.auth.tenant
[OUTPUT]: 对外提供 LarkAuthenticationNode
[POS]: Lark Authentication 节点，输出 {"tenantAccessToken": ...}
"""

from typing import Any, Dict, Iterable, List, Optional

from rich.markup import escape

from lark_nodes.auth.tenant import TenantAuthenticator
from lark_nodes.errors import LarkNodeError, LarkValidationError
from lark_nodes.schema.models import LarkAppCredentials, TokenContext
from lark_nodes.utils.console import get_error_console

console = get_error_console()


class LarkAuthenticationNode:
    """
    获取 tenant_access_token 的节点

    每个输入 item 请求一次 token，输出一个 {"tenantAccessToken": token}。
    任意一次失败都会中止整批处理。
    """

    def __init__(
            self,
            credentials: LarkAppCredentials,
            authenticator: Optional[TenantAuthenticator] = None,
            is_feishu: bool = False,
    ):
        self.credentials = credentials
        self._authenticator = authenticator
        self.is_feishu = is_feishu

    @property
    def authenticator(self) -> TenantAuthenticator:
        if self._authenticator is None:
            self._authenticator = TenantAuthenticator(
                app_id=self.credentials.app_id,
                app_secret=self.credentials.app_secret,
                is_feishu=self.is_feishu,
            )
        return self._authenticator

    def execute(self, items: Optional[Iterable[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
        # 没有上游输入时也执行一次
        items = list(items or []) or [{}]
        return_data = []

        for _ in items:
            try:
                if not self.credentials.app_id or not self.credentials.app_secret:
                    raise LarkValidationError("App ID and App Secret are required")
                token = self.authenticator.get_token()
            except LarkNodeError as e:
                console.print(f"[red]Error getting tenant_access_token: {escape(str(e))}[/red]")
                raise

            return_data.append(TokenContext(tenant_access_token=token).to_item())

        return return_data

    def close(self) -> None:
        if self._authenticator is not None:
            self._authenticator.close()
