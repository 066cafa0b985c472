# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：common.py
# @Date   ：2026/03/06 10:15
# @Author ：leemysw
# 2026/03/06 10:15   Create
# =====================================================
"""
[INPUT]: 依赖 lark_nodes.utils.config, lark_nodes.nodes
[OUTPUT]: 对外提供 get_credentials, resolve_token_items, console
[POS]: cli 模块的共享工具函数
"""

import os
from typing import Dict, List, Optional

from lark_nodes.nodes import LarkAuthenticationNode
from lark_nodes.schema.models import LarkAppCredentials, TokenContext
from lark_nodes.utils.config import AppConfig
from lark_nodes.utils.console import get_console

console = get_console()

TOKEN_ENV = "LARK_TENANT_ACCESS_TOKEN"


def get_credentials(
        app_id: Optional[str] = None,
        app_secret: Optional[str] = None,
        app_token: Optional[str] = None,
        table_id: Optional[str] = None,
        feishu: Optional[bool] = None,
) -> tuple[LarkAppCredentials, bool]:
    """
    获取凭证（优先级：命令行参数 > 环境变量 > 配置文件）

    feishu 为 None 时沿用配置文件中的 is_feishu，--feishu/--lark 可覆盖。

    Returns:
        (credentials, is_feishu)
    """
    # 加载配置文件作为 fallback
    config = AppConfig.load()

    credentials = LarkAppCredentials(
        app_id=app_id or os.getenv("LARK_APP_ID") or config.app_id,
        app_secret=app_secret or os.getenv("LARK_APP_SECRET") or config.app_secret,
        app_token=app_token or os.getenv("LARK_APP_TOKEN") or config.app_token,
        table_id=table_id or os.getenv("LARK_TABLE_ID") or config.table_id,
    )

    is_feishu = config.is_feishu if feishu is None else feishu

    return credentials, is_feishu


def resolve_token_items(
        credentials: LarkAppCredentials,
        token: Optional[str] = None,
        is_feishu: bool = False,
) -> List[Dict[str, str]]:
    """
    获取 Base 节点的输入 items

    显式传入 token 时直接使用，否则先执行 Authentication 节点。
    """
    if token:
        return [TokenContext(tenant_access_token=token).to_item()]

    node = LarkAuthenticationNode(credentials, is_feishu=is_feishu)
    try:
        return node.execute()
    finally:
        node.close()
