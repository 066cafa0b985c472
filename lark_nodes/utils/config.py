# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：config.py
# @Date   ：2026/03/02 11:00
# @Author ：leemysw
# 2026/03/02 11:00   Create
# =====================================================
"""
[INPUT]: 依赖 json, pathlib
[OUTPUT]: 对外提供 AppConfig, get_config_dir
[POS]: 凭证配置文件读写
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_DIR_ENV = "LARK_NODES_CONFIG_DIR"


def get_config_dir() -> Path:
    """配置目录，可通过 LARK_NODES_CONFIG_DIR 覆盖"""
    override = os.getenv(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".lark-nodes"


@dataclass
class AppConfig:
    """
    应用配置

    保存在 ~/.lark-nodes/config.json，对应 Lark 应用凭证 + 多维表格定位。
    """
    app_id: str = ""
    app_secret: str = field(default="", repr=False)
    app_token: str = ""
    table_id: str = ""
    is_feishu: bool = False

    @property
    def config_file(self) -> Path:
        return get_config_dir() / "config.json"

    @classmethod
    def load(cls) -> "AppConfig":
        config = cls()
        if not config.config_file.exists():
            return config

        data = json.loads(config.config_file.read_text(encoding="utf-8"))
        return cls(
            app_id=data.get("app_id", ""),
            app_secret=data.get("app_secret", ""),
            app_token=data.get("app_token", ""),
            table_id=data.get("table_id", ""),
            is_feishu=bool(data.get("is_feishu", False)),
        )

    def save(self) -> None:
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(json.dumps({
            "app_id": self.app_id,
            "app_secret": self.app_secret,
            "app_token": self.app_token,
            "table_id": self.table_id,
            "is_feishu": self.is_feishu,
        }, indent=2, ensure_ascii=False), encoding="utf-8")

    def clear(self) -> None:
        if self.config_file.exists():
            self.config_file.unlink()

    def has_credentials(self) -> bool:
        return bool(self.app_id and self.app_secret)
