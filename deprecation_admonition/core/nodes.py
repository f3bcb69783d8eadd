"""
文档节点模块 - 宿主文档引擎拥有的块节点模型

块处理器只读取和构造这些节点，不会保留它们。
"""

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional


# ============================================================
# 配置常量
# ============================================================

# 内容模型（与 Asciidoctor 一致）
CONTENT_MODELS: frozenset[str] = frozenset({
    "compound",   # 可嵌套块级内容
    "simple",     # 单个段落的内联文本
    "verbatim",   # 原样输出（代码块）
    "raw",        # 直通 HTML
    "empty",      # 无内容
})

# 块处理器可以注册的上下文
BLOCK_CONTEXTS: frozenset[str] = frozenset({
    "example",
    "listing",
    "literal",
    "open",
    "paragraph",
    "pass",
    "quote",
    "sidebar",
    "verse",
})


# ============================================================
# 数据模型
# ============================================================

@dataclass
class Block:
    """
    块节点数据模型

    Attributes:
        context: 节点的语义类型（admonition, paragraph, example, open, document 等）
        lines: 已解析的子内容行，顺序即原文顺序
        attributes: 字符串键值属性
        content_model: 内容模型，见 CONTENT_MODELS
        parent: 父节点（不参与比较）
    """
    context: str
    lines: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    content_model: str = "simple"
    parent: Optional["Block"] = field(default=None, repr=False, compare=False)

    def attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """读取属性，不存在时返回 default"""
        return self.attributes.get(name, default)

    @property
    def name(self) -> Optional[str]:
        return self.attr("name")

    @property
    def caption(self) -> Optional[str]:
        return self.attr("caption")

    @property
    def role(self) -> Optional[str]:
        return self.attr("role")

    @property
    def id(self) -> Optional[str]:
        return self.attr("id")


def create_block(
    parent: Optional[Block],
    context: str,
    lines: Iterable[str],
    attrs: Mapping[str, str],
    content_model: str = "simple",
) -> Block:
    """
    构造新的块节点

    lines 和 attrs 都会被复制，调用方持有的原始对象不会被新节点共享。

    Args:
        parent: 父节点，只作为引用保存
        context: 节点类型
        lines: 子内容行
        attrs: 节点属性
        content_model: 内容模型

    Returns:
        新的 Block 对象

    Raises:
        ValueError: 未知的内容模型
    """
    if content_model not in CONTENT_MODELS:
        raise ValueError(f"Unknown content model: {content_model}")

    return Block(
        context=context,
        lines=list(lines),
        attributes=dict(attrs),
        content_model=content_model,
        parent=parent,
    )
