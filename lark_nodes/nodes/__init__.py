"""
[INPUT]: 依赖 authentication.py, base.py
[OUTPUT]: 对外提供 LarkAuthenticationNode, LarkBaseNode
[POS]: nodes 模块入口
"""

from lark_nodes.nodes.authentication import LarkAuthenticationNode
from lark_nodes.nodes.base import LarkBaseNode

__all__ = ["LarkAuthenticationNode", "LarkBaseNode"]
