"""
Core Layer - 核心层

包含块节点模型、行读取器和块属性解析。
"""

from deprecation_admonition.core.nodes import (
    Block,
    create_block,
    CONTENT_MODELS,
    BLOCK_CONTEXTS,
)
from deprecation_admonition.core.reader import Reader
from deprecation_admonition.core.attributes import parse_block_attributes

__all__ = [
    # nodes
    "Block",
    "create_block",
    "CONTENT_MODELS",
    "BLOCK_CONTEXTS",
    # reader
    "Reader",
    # attributes
    "parse_block_attributes",
]
