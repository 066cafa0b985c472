# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：cmd_auth.py
# @Date   ：2026/03/06 10:20
# @Author ：leemysw
# 2026/03/06 10:20   Create
# =====================================================
"""
[INPUT]: 依赖 typer, lark_nodes.nodes
[OUTPUT]: 对外提供 token 命令
[POS]: cli 模块的认证命令
"""

import json
from typing import Optional

import typer
from rich.markup import escape

from lark_nodes.errors import LarkNodeError
from lark_nodes.nodes import LarkAuthenticationNode
from .common import console, get_credentials


# ==============================================================================
# token 命令
# ==============================================================================


def token(
        app_id: Optional[str] = typer.Option(
            None,
            "--app-id",
            help="Lark 应用 App ID（覆盖配置文件）",
        ),
        app_secret: Optional[str] = typer.Option(
            None,
            "--app-secret",
            help="Lark 应用 App Secret（覆盖配置文件）",
        ),
        feishu: Optional[bool] = typer.Option(
            None,
            "--feishu/--lark",
            help="使用飞书 (国内版) 或 Lark，默认沿用配置文件",
        ),
        as_json: bool = typer.Option(
            False,
            "--json",
            help="输出节点 item：{\"tenantAccessToken\": ...}",
        ),
):
    """
    [yellow]❁[/] 获取 tenant_access_token

    示例:

        # 使用已配置的凭证
        lark-nodes token

        # 或指定凭证
        lark-nodes token --app-id cli_xxx --app-secret xxx
    """
    credentials, is_feishu = get_credentials(app_id, app_secret, feishu=feishu)

    if not credentials.app_id or not credentials.app_secret:
        console.print(
            "[red]❌ 需要提供应用凭证[/red]\n\n"
            "方式一：先配置凭证（推荐）\n"
            "  [cyan]lark-nodes config set --app-id xxx --app-secret xxx[/cyan]\n\n"
            "方式二：命令行传入\n"
            "  [cyan]lark-nodes token --app-id xxx --app-secret xxx[/cyan]"
        )
        raise typer.Exit(1)

    node = LarkAuthenticationNode(credentials, is_feishu=is_feishu)
    try:
        items = node.execute()
    except LarkNodeError as e:
        console.print(f"[red]❌ 获取 token 失败: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        node.close()

    if as_json:
        typer.echo(json.dumps(items[0], ensure_ascii=False))
    else:
        typer.echo(items[0]["tenantAccessToken"])
