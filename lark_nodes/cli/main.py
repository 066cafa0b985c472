# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：main.py
# @Date   ：2026/03/06 10:00
# @Author ：leemysw
# 2026/03/06 10:00   Create
# =====================================================
"""
[INPUT]: 依赖 typer, 各命令子模块
[OUTPUT]: 对外提供 app (Typer 应用) 作为 CLI 入口
[POS]: cli 模块的主入口，组装所有命令
"""

import typer

from lark_nodes import __version__
from .common import console

# ==============================================================================
# 创建 Typer 应用
# ==============================================================================
app = typer.Typer(
    name="lark-nodes",
    help="🚀 Lark 多维表格记录 CRUD 工具",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ==============================================================================
# 版本回调
# ==============================================================================
def version_callback(value: bool):
    if value:
        console.print(f"[bold blue]lark-nodes[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


# ==============================================================================
# 主回调
# ==============================================================================
@app.callback()
def main(
        version: bool = typer.Option(
            None,
            "--version",
            "-v",
            help="显示版本号",
            callback=version_callback,
            is_eager=True,
        ),
):
    """
    🚀 Lark 多维表格记录 CRUD 工具

    先获取 tenant_access_token，再对多维表格记录做 list/create/update/delete。
    """
    pass


# ==============================================================================
# 注册命令 - 认证
# ==============================================================================
from .cmd_auth import token

app.command()(token)

# ==============================================================================
# 记录命令组
# ==============================================================================
from .cmd_records import records_create, records_delete, records_list, records_update

records_app = typer.Typer(help="[dim]▦[/] 多维表格记录", rich_markup_mode="rich")
app.add_typer(records_app, name="records")

records_app.command("list")(records_list)
records_app.command("create")(records_create)
records_app.command("update")(records_update)
records_app.command("delete")(records_delete)

# ==============================================================================
# 配置命令组
# ==============================================================================
from .cmd_config import config_clear, config_set, config_show

config_app = typer.Typer(help="[dim]❄[/] 配置管理", rich_markup_mode="rich")
app.add_typer(config_app, name="config")

config_app.command("set")(config_set)
config_app.command("show")(config_show)
config_app.command("clear")(config_clear)

# ==============================================================================
# 入口点
# ==============================================================================
if __name__ == "__main__":
    app()
