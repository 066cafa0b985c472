# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：base.py
# @Date   ：2026/03/03 14:30
# @Author ：leemysw
# 2026/03/03 14:30   Create
# 2026/03/05 16:40   Use TokenContext, add continue_on_fail
# =====================================================
"""
[INPUT]: 依赖 lark_nodes.core.sdk, lark_nodes.schema.models
[OUTPUT]: 对外提供 LarkBaseNode
[POS]: Lark Base 节点，对多维表格记录做 list/create/update/delete
"""

from typing import Any, Dict, Iterable, List, Optional

from lark_nodes.core.sdk import LarkSDK
from lark_nodes.errors import LarkNodeError, LarkValidationError
from lark_nodes.schema.models import (
    LarkAppCredentials,
    RecordNodeParameters,
    RecordOperation,
    TokenContext,
)


class LarkBaseNode:
    """
    多维表格记录节点

    每个输入 item 需携带上游 Lark Authentication 节点输出的 tenantAccessToken。
    逐个处理 item，每个 item 发一次请求，输出顺序与输入一致。

    默认第一个失败即中止整批（后续 item 不再处理）；
    continue_on_fail=True 时失败的 item 输出 {"error": message} 并继续。
    """

    def __init__(
            self,
            credentials: LarkAppCredentials,
            parameters: Optional[RecordNodeParameters] = None,
            sdk: Optional[LarkSDK] = None,
            continue_on_fail: bool = False,
    ):
        self.credentials = credentials
        self.parameters = parameters or RecordNodeParameters()
        self.sdk = sdk or LarkSDK()
        self.continue_on_fail = continue_on_fail

    @property
    def operation(self) -> RecordOperation:
        return self.parameters.operation

    def execute(self, items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return_data = []

        for item in items:
            try:
                context = TokenContext.from_item(item)
                result = self.run(context)
            except LarkNodeError as e:
                self.sdk.log_error(f"Lark Base operation \"{self.operation.value}\"", e)
                if self.continue_on_fail:
                    return_data.append({"error": str(e)})
                    continue
                raise

            return_data.append(result)

        return return_data

    def run(self, context: TokenContext) -> Dict[str, Any]:
        """使用显式 token 执行一次操作"""
        app_token, table_id = self._require_table()
        access_token = context.tenant_access_token
        params = self.parameters
        bitable = self.sdk.bitable

        if self.operation is RecordOperation.GET_RECORD_LIST:
            return bitable.list_records(app_token, table_id, access_token, limit=params.limit)
        if self.operation is RecordOperation.CREATE_RECORD:
            return bitable.create_record(app_token, table_id, params.fields, access_token)
        if self.operation is RecordOperation.UPDATE_RECORD:
            return bitable.update_record(app_token, table_id, params.record_id, params.fields, access_token)
        return bitable.delete_record(app_token, table_id, params.record_id, access_token)

    def _require_table(self):
        if not self.credentials.app_token or not self.credentials.table_id:
            raise LarkValidationError("App Token (Base) and Table ID are required")
        return self.credentials.app_token, self.credentials.table_id
