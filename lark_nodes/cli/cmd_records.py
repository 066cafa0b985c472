# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：cmd_records.py
# @Date   ：2026/03/06 11:00
# @Author ：leemysw
# 2026/03/06 11:00   Create
# =====================================================
"""
[INPUT]: 依赖 typer, lark_nodes.nodes
[OUTPUT]: 对外提供 records_list, records_create, records_update, records_delete 命令
[POS]: cli 模块的多维表格记录命令
"""

import json
from typing import Optional

import typer
from rich.markup import escape

from lark_nodes.core.sdk import FEISHU_BASE_URL, LARK_BASE_URL, LarkSDK
from lark_nodes.errors import LarkNodeError
from lark_nodes.nodes import LarkBaseNode
from lark_nodes.schema.models import DEFAULT_LIMIT, RecordNodeParameters, RecordOperation
from .common import TOKEN_ENV, console, get_credentials, resolve_token_items

# ==============================================================================
# 公共选项
# ==============================================================================
TokenOption = typer.Option(None, "-t", "--token", envvar=TOKEN_ENV, help="tenant_access_token，不传则用应用凭证获取")
AppIdOption = typer.Option(None, "--app-id", help="Lark 应用 App ID")
AppSecretOption = typer.Option(None, "--app-secret", help="Lark 应用 App Secret")
AppTokenOption = typer.Option(None, "--app-token", help="多维表格 App Token (Base)")
TableIdOption = typer.Option(None, "--table-id", help="数据表 Table ID")
FeishuOption = typer.Option(None, "--feishu/--lark", help="使用飞书 (国内版) 或 Lark，默认沿用配置文件")


def _run(
        parameters: RecordNodeParameters,
        token: Optional[str],
        app_id: Optional[str],
        app_secret: Optional[str],
        app_token: Optional[str],
        table_id: Optional[str],
        feishu: Optional[bool],
):
    """获取 token -> 执行 Base 节点 -> 输出 JSON"""
    credentials, is_feishu = get_credentials(app_id, app_secret, app_token, table_id, feishu=feishu)

    if not credentials.app_token or not credentials.table_id:
        console.print(
            "[red]❌ 需要提供 App Token 和 Table ID[/red]\n"
            "  [cyan]lark-nodes config set --app-token xxx --table-id xxx[/cyan]"
        )
        raise typer.Exit(1)

    if not token and not (credentials.app_id and credentials.app_secret):
        console.print("[red]❌ 需要提供 --token 或应用凭证 (App ID / App Secret)[/red]")
        raise typer.Exit(1)

    sdk = LarkSDK(base_url=FEISHU_BASE_URL if is_feishu else LARK_BASE_URL)
    try:
        items = resolve_token_items(credentials, token=token, is_feishu=is_feishu)
        output = LarkBaseNode(credentials, parameters, sdk=sdk).execute(items)
    except LarkNodeError as e:
        console.print(f"[red]❌ 操作失败: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        sdk.close()

    for item in output:
        typer.echo(json.dumps(item, indent=2, ensure_ascii=False))


# ==============================================================================
# records list
# ==============================================================================


def records_list(
        limit: int = typer.Option(DEFAULT_LIMIT, "-n", "--limit", help="每页记录数，最大 500"),
        token: Optional[str] = TokenOption,
        app_id: Optional[str] = AppIdOption,
        app_secret: Optional[str] = AppSecretOption,
        app_token: Optional[str] = AppTokenOption,
        table_id: Optional[str] = TableIdOption,
        feishu: Optional[bool] = FeishuOption,
):
    """
    [green]▶[/] 获取记录列表

    示例:

        lark-nodes records list --limit 20
    """
    parameters = RecordNodeParameters(operation=RecordOperation.GET_RECORD_LIST, limit=limit)
    _run(parameters, token, app_id, app_secret, app_token, table_id, feishu)


# ==============================================================================
# records create
# ==============================================================================


def records_create(
        fields: str = typer.Argument(..., help='字段 JSON，例如 \'{"Name": "Alice"}\''),
        token: Optional[str] = TokenOption,
        app_id: Optional[str] = AppIdOption,
        app_secret: Optional[str] = AppSecretOption,
        app_token: Optional[str] = AppTokenOption,
        table_id: Optional[str] = TableIdOption,
        feishu: Optional[bool] = FeishuOption,
):
    """
    [green]✚[/] 新增记录

    示例:

        lark-nodes records create '{"Name": "Alice"}'
    """
    parameters = RecordNodeParameters(operation=RecordOperation.CREATE_RECORD, fields=fields)
    _run(parameters, token, app_id, app_secret, app_token, table_id, feishu)


# ==============================================================================
# records update
# ==============================================================================


def records_update(
        record_id: str = typer.Argument(..., help="记录 ID"),
        fields: str = typer.Argument(..., help="字段 JSON"),
        token: Optional[str] = TokenOption,
        app_id: Optional[str] = AppIdOption,
        app_secret: Optional[str] = AppSecretOption,
        app_token: Optional[str] = AppTokenOption,
        table_id: Optional[str] = TableIdOption,
        feishu: Optional[bool] = FeishuOption,
):
    """
    [yellow]✎[/] 更新记录

    示例:

        lark-nodes records update recXXXX '{"Name": "Bob"}'
    """
    parameters = RecordNodeParameters(
        operation=RecordOperation.UPDATE_RECORD,
        record_id=record_id,
        fields=fields,
    )
    _run(parameters, token, app_id, app_secret, app_token, table_id, feishu)


# ==============================================================================
# records delete
# ==============================================================================


def records_delete(
        record_id: str = typer.Argument(..., help="记录 ID"),
        token: Optional[str] = TokenOption,
        app_id: Optional[str] = AppIdOption,
        app_secret: Optional[str] = AppSecretOption,
        app_token: Optional[str] = AppTokenOption,
        table_id: Optional[str] = TableIdOption,
        feishu: Optional[bool] = FeishuOption,
):
    """
    [red]✖[/] 删除记录

    示例:

        lark-nodes records delete recXXXX
    """
    parameters = RecordNodeParameters(operation=RecordOperation.DELETE_RECORD, record_id=record_id)
    _run(parameters, token, app_id, app_secret, app_token, table_id, feishu)
