# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：fields.py
# @Date   ：2026/03/03 09:40
# @Author ：leemysw
# 2026/03/03 09:40   Create
# =====================================================
"""
[INPUT]: 依赖 lark_nodes.errors
[OUTPUT]: 对外提供 parse_fields, require_record_id, validate_limit
[POS]: 节点参数校验，所有校验都在发请求之前完成
"""

import json
from typing import Any, Dict, Mapping, Union

from lark_nodes.errors import LarkValidationError
from lark_nodes.schema.models import MAX_LIMIT


def parse_fields(value: Union[str, Mapping[str, Any], None]) -> Dict[str, Any]:
    """
    解析 fields 参数，返回请求体 {"fields": {...}}

    支持两种写法：
    - {"Name": "Alice"}            -> 自动包一层 fields
    - {"fields": {"Name": "Alice"}} -> 原样使用
    """
    if isinstance(value, Mapping):
        fields_obj = dict(value)
    else:
        try:
            fields_obj = json.loads(value or "")
        except (TypeError, ValueError):
            raise LarkValidationError("Fields must be valid JSON format") from None

    if not isinstance(fields_obj, dict):
        raise LarkValidationError(
            f"Invalid fields format: expected a JSON object, got {type(fields_obj).__name__}"
        )

    if "fields" not in fields_obj:
        fields_obj = {"fields": fields_obj}

    if not isinstance(fields_obj["fields"], dict):
        raise LarkValidationError("Invalid fields format: Invalid fields structure")

    return fields_obj


def require_record_id(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise LarkValidationError("Record ID must be a non-empty string")
    return value.strip()


def validate_limit(value: Any) -> int:
    """page_size 取值范围 1 ~ 500"""
    message = f"Limit must be an integer between 1 and {MAX_LIMIT}"
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise LarkValidationError(message)
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise LarkValidationError(message) from None
    if not 1 <= limit <= MAX_LIMIT:
        raise LarkValidationError(message)
    return limit
