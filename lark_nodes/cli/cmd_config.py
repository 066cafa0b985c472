# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：cmd_config.py
# @Date   ：2026/03/06 10:30
# @Author ：leemysw
# 2026/03/06 10:30   Create
# =====================================================
"""
[INPUT]: 依赖 typer, lark_nodes.utils.config
[OUTPUT]: 对外提供 config_set, config_show, config_clear 命令
[POS]: cli 模块的配置管理命令
"""

import os
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from lark_nodes.utils.config import AppConfig, get_config_dir
from .common import console


def _mask(value: str) -> str:
    return f"{value[:10]}...{value[-4:]}" if len(value) > 14 else value


# ==============================================================================
# config set 命令
# ==============================================================================


def config_set(
        app_id: Optional[str] = typer.Option(None, "--app-id", help="Lark 应用 App ID"),
        app_secret: Optional[str] = typer.Option(None, "--app-secret", help="Lark 应用 App Secret"),
        app_token: Optional[str] = typer.Option(None, "--app-token", help="多维表格 App Token (Base)"),
        table_id: Optional[str] = typer.Option(None, "--table-id", help="数据表 Table ID"),
        feishu: Optional[bool] = typer.Option(None, "--feishu/--lark", help="切换飞书 (国内版) / Lark"),
):
    """
    设置应用凭证和多维表格

    示例:
        lark-nodes config set --app-id cli_xxx --app-secret xxx --app-token bascnxxx --table-id tblxxx
    """
    config = AppConfig.load()

    # 更新配置（只更新传入的值）
    if app_id:
        config.app_id = app_id
    if app_secret:
        config.app_secret = app_secret
    if app_token:
        config.app_token = app_token
    if table_id:
        config.table_id = table_id
    if feishu is not None:
        config.is_feishu = feishu

    # 交互式输入缺失的值
    if not config.app_id:
        config.app_id = typer.prompt("App ID")
    if not config.app_secret:
        config.app_secret = typer.prompt("App Secret", hide_input=True)

    config.save()

    console.print(Panel(
        f"✅ 配置已保存至: [cyan]{config.config_file}[/cyan]\n\n"
        f"App ID: [green]{_mask(config.app_id)}[/green]\n"
        f"App Secret: [dim]已保存（已隐藏）[/dim]\n"
        f"App Token: {config.app_token or '[dim]未设置[/dim]'}\n"
        f"Table ID: {config.table_id or '[dim]未设置[/dim]'}\n"
        f"飞书模式: {'是' if config.is_feishu else '否'}",
        title="配置成功",
        border_style="green",
    ))


# ==============================================================================
# config show 命令
# ==============================================================================


def config_show():
    """显示当前配置"""
    config = AppConfig.load()

    table = Table(title="当前配置")
    table.add_column("配置项", style="cyan")
    table.add_column("来源", style="dim")
    table.add_column("值", style="green")

    rows = [
        ("App ID", "LARK_APP_ID", config.app_id, False),
        ("App Secret", "LARK_APP_SECRET", config.app_secret, True),
        ("App Token", "LARK_APP_TOKEN", config.app_token, False),
        ("Table ID", "LARK_TABLE_ID", config.table_id, False),
    ]
    for label, env_name, file_value, secret in rows:
        env_value = os.getenv(env_name)
        value = env_value or file_value
        if not value:
            table.add_row(label, "-", "[dim]未设置[/dim]")
            continue
        source = "环境变量" if env_value else "配置文件"
        table.add_row(label, source, "[dim]已设置（已隐藏）[/dim]" if secret else _mask(value))

    table.add_row("飞书模式", "配置文件", "是" if config.is_feishu else "否")
    table.add_row("配置文件", "-", "存在" if config.config_file.exists() else "❌ 不存在")
    table.add_row("配置目录", "-", str(get_config_dir()))

    console.print(table)

    if not config.has_credentials() and not os.getenv("LARK_APP_ID"):
        console.print("\n[yellow]💡 提示: 运行以下命令配置凭证[/yellow]")
        console.print("   [cyan]lark-nodes config set --app-id xxx --app-secret xxx[/cyan]")


# ==============================================================================
# config clear 命令
# ==============================================================================


def config_clear(
        force: bool = typer.Option(False, "--force", "-f", help="跳过确认"),
):
    """清除配置文件"""
    config = AppConfig.load()

    if not config.config_file.exists():
        console.print("[yellow]没有可清除的配置[/yellow]")
        return

    if not force:
        confirm = typer.confirm("确定要清除配置文件吗？")
        if not confirm:
            console.print("已取消")
            raise typer.Abort()

    config.clear()
    console.print("[green]✅ 配置文件已清除[/green]")
