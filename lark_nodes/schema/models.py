# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：models.py
# @Date   ：2026/03/02 10:20
# @Author ：leemysw
# 2026/03/02 10:20   Create
# 2026/03/05 16:40   Add TokenContext
# =====================================================
"""
[INPUT]: 依赖 lark_nodes.errors
[OUTPUT]: 对外提供 LarkAppCredentials, RecordOperation, RecordNodeParameters, TokenContext
[POS]: 节点间传递的数据模型
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from lark_nodes.errors import LarkValidationError, MissingTokenError

# 节点之间通过该字段传递 token
TOKEN_ITEM_KEY = "tenantAccessToken"

DEFAULT_LIMIT = 100
MAX_LIMIT = 500


class RecordOperation(str, Enum):
    """记录操作类型（取值即宿主侧的操作名）"""
    GET_RECORD_LIST = "getRecordList"
    CREATE_RECORD = "createRecord"
    UPDATE_RECORD = "updateRecord"
    DELETE_RECORD = "deleteRecord"

    @classmethod
    def parse(cls, value: Union[str, "RecordOperation"]) -> "RecordOperation":
        try:
            return cls(value)
        except ValueError:
            options = ", ".join(op.value for op in cls)
            raise LarkValidationError(f"Unknown operation: {value!r}. Expected one of: {options}") from None


@dataclass
class LarkAppCredentials:
    """Lark 应用凭证 + 多维表格定位"""
    app_id: str = ""
    app_secret: str = field(default="", repr=False)
    app_token: str = ""
    table_id: str = ""


@dataclass
class RecordNodeParameters:
    """Base 节点参数"""
    operation: RecordOperation = RecordOperation.GET_RECORD_LIST
    limit: int = DEFAULT_LIMIT
    fields: Union[str, Dict[str, Any]] = "{}"
    record_id: str = ""

    def __post_init__(self):
        self.operation = RecordOperation.parse(self.operation)


@dataclass(frozen=True)
class TokenContext:
    """
    显式的 token 上下文

    宿主侧的 item 以约定字段 tenantAccessToken 携带 token，
    这里把它收敛为一个有类型的对象，在进入网络调用前完成校验。
    """
    tenant_access_token: str

    @classmethod
    def from_item(cls, item: Optional[Mapping[str, Any]]) -> "TokenContext":
        token = (item or {}).get(TOKEN_ITEM_KEY)
        if not isinstance(token, str) or not token.strip():
            raise MissingTokenError(
                "Tenant Access Token not found in input data. "
                'Please connect a "Lark Authentication" node before this node.'
            )
        return cls(tenant_access_token=token)

    def to_item(self) -> Dict[str, str]:
        return {TOKEN_ITEM_KEY: self.tenant_access_token}
