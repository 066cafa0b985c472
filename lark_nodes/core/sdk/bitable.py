# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：bitable.py
# @Date   ：2026/03/02 15:20
# @Author ：leemysw
# 2026/03/02 15:20   Create
# 2026/03/04 11:30   Add create/update/delete
# =====================================================
"""
[INPUT]: 依赖 base.py, lark_nodes.core.fields
[OUTPUT]: 对外提供 BitableRecordAPI
[POS]: SDK 多维表格记录 API
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from lark_nodes.core.fields import parse_fields, require_record_id, validate_limit
from lark_nodes.errors import LarkAPIError, LarkTransportError, RecordNotFoundError
from .base import SubModule


class BitableRecordAPI(SubModule):
    """多维表格记录 API"""

    @staticmethod
    def _records_path(app_token: str, table_id: str) -> str:
        return f"/open-apis/bitable/v1/apps/{app_token}/tables/{table_id}/records"

    def list_records(
            self,
            app_token: str,
            table_id: str,
            access_token: str,
            limit: int = 100,
            page_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        获取记录列表（单页）

        Returns:
            data 字段：{"items": [...], "has_more": bool, "page_token": str, "total": int}
        """
        params: Dict[str, Any] = {"page_size": validate_limit(limit)}
        if page_token:
            params["page_token"] = page_token

        envelope = self._request(
            "GET",
            self._records_path(app_token, table_id),
            access_token,
            params=params,
        )

        if envelope.get("code") == 0 and envelope.get("data") is not None:
            return envelope["data"]

        raise LarkAPIError(
            f"Failed to get records: {envelope.get('msg') or 'Unknown error'}. "
            f"Details: {json.dumps(envelope, ensure_ascii=False)}",
            code=envelope.get("code"),
            msg=envelope.get("msg"),
            payload=envelope,
        )

    def create_record(
            self,
            app_token: str,
            table_id: str,
            fields: Union[str, Mapping[str, Any]],
            access_token: str,
    ) -> Dict[str, Any]:
        """新增一条记录，返回 data（包含 record 及新 record_id）"""
        body = parse_fields(fields)

        envelope = self._request(
            "POST",
            self._records_path(app_token, table_id),
            access_token,
            json_body=body,
        )

        if envelope.get("code") == 0 and envelope.get("data") is not None:
            return envelope["data"]

        raise LarkAPIError(
            f"Failed to create record: {envelope.get('msg') or 'Unknown error'}. "
            f"Details: {json.dumps(envelope, ensure_ascii=False)}",
            code=envelope.get("code"),
            msg=envelope.get("msg"),
            payload=envelope,
        )

    def update_record(
            self,
            app_token: str,
            table_id: str,
            record_id: str,
            fields: Union[str, Mapping[str, Any]],
            access_token: str,
    ) -> Dict[str, Any]:
        """更新一条记录"""
        record_id = require_record_id(record_id)
        body = parse_fields(fields)

        envelope = self._request(
            "PUT",
            f"{self._records_path(app_token, table_id)}/{record_id}",
            access_token,
            json_body=body,
        )

        if envelope.get("code") == 0 and envelope.get("data") is not None:
            return envelope["data"]

        raise LarkAPIError(
            f"Failed to update record: {envelope.get('msg') or 'Unknown error'}. "
            f"Code: {envelope.get('code')}",
            code=envelope.get("code"),
            msg=envelope.get("msg"),
            payload=envelope,
        )

    def delete_record(
            self,
            app_token: str,
            table_id: str,
            record_id: str,
            access_token: str,
    ) -> Dict[str, Any]:
        """
        删除一条记录

        接口有 data 时原样返回，否则构造确认信息：
            {"success": True, "recordId": ..., "message": ..., "deletedAt": ISO 时间}
        """
        record_id = require_record_id(record_id)

        try:
            envelope = self._request(
                "DELETE",
                f"{self._records_path(app_token, table_id)}/{record_id}",
                access_token,
            )
        except LarkAPIError as e:
            if e.status_code == 404:
                raise RecordNotFoundError(
                    f"Record not found (ID: {record_id})",
                    code=e.code,
                    msg=e.msg,
                    status_code=e.status_code,
                    payload=e.payload,
                ) from e
            raise LarkAPIError(
                f"Failed to delete record: {e}",
                code=e.code,
                msg=e.msg,
                status_code=e.status_code,
                payload=e.payload,
            ) from e
        except LarkTransportError as e:
            raise LarkTransportError(f"Failed to delete record: {e}") from e

        if envelope.get("code") != 0:
            raise LarkAPIError(
                f"Failed to delete record: Lark API Error [{envelope.get('code')}]: {envelope.get('msg')}",
                code=envelope.get("code"),
                msg=envelope.get("msg"),
                payload=envelope,
            )

        if envelope.get("data"):
            return envelope["data"]

        return {
            "success": True,
            "recordId": record_id,
            "message": envelope.get("msg") or "Record deleted successfully",
            "deletedAt": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        }
