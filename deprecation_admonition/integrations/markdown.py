"""
Markdown 宿主绑定模块 - 让 markdown-it-py 充当块扩展的宿主引擎

识别 AsciiDoc 风格的块属性行及分隔块：

    [DEPRECATED]          段落上下文 (paragraph)
    This API is deprecated.

    [DEPRECATED#dep-1]    示例块上下文 (example)
    ====
    ...
    ====

    [DEPRECATED]          开放块上下文 (open)
    --
    ...
    --

匹配到已注册的处理器时，把块内容行和属性交给处理器，
再把返回的节点转换为 markdown-it token。解析与 HTML 输出都由 markdown-it 完成。
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock

from deprecation_admonition.core.attributes import parse_block_attributes
from deprecation_admonition.core.nodes import Block, create_block
from deprecation_admonition.core.reader import Reader
from deprecation_admonition.extensions.base import ExtensionRegistry, create_default_registry

logger = logging.getLogger(__name__)


# ============================================================
# 配置常量
# ============================================================

# 块属性行: [STYLE#id.role, key=value]，排除 [[anchor]]
ATTRIBUTE_LINE_PATTERN = re.compile(r'^\[(?P<attrlist>[^\[\]].*)\]$')

# 分隔符 -> 块上下文（示例块为四个及以上的 =，闭合行须与开头等长）
DELIMITER_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"^={4,}$"), "example"),
    (re.compile(r"^--$"), "open"),
]


# ============================================================
# 数据模型
# ============================================================

@dataclass
class HostConfig:
    """
    宿主渲染配置

    Attributes:
        container_tag: 外层容器的 HTML 标签
        container_class: 警示块容器的 CSS 类
        title_class: 标题元素的 CSS 类
        content_class: 内容元素的 CSS 类
    """
    container_tag: str = "div"
    container_class: str = "admonitionblock"
    title_class: str = "title"
    content_class: str = "content"


# ============================================================
# 插件入口
# ============================================================

def block_extensions_plugin(
    md: MarkdownIt,
    registry: Optional[ExtensionRegistry] = None,
    config: Optional[HostConfig] = None,
) -> None:
    """
    安装块扩展规则

    Args:
        md: MarkdownIt 实例
        registry: 扩展注册表，默认使用 create_default_registry()
        config: 渲染配置
    """
    if registry is None:
        registry = create_default_registry()
    rule = _make_block_rule(registry, config or HostConfig())
    md.block.ruler.before("fence", "block_extensions", rule, {"alt": []})


def create_markdown(
    registry: Optional[ExtensionRegistry] = None,
    config: Optional[HostConfig] = None,
) -> MarkdownIt:
    """创建已安装块扩展的 MarkdownIt 实例"""
    return MarkdownIt().use(block_extensions_plugin, registry=registry, config=config)


def render_markdown(
    content: str,
    registry: Optional[ExtensionRegistry] = None,
    config: Optional[HostConfig] = None,
) -> str:
    """
    渲染 Markdown 内容为 HTML

    Args:
        content: Markdown 内容
        registry: 扩展注册表
        config: 渲染配置

    Returns:
        HTML 字符串
    """
    return create_markdown(registry, config).render(content)


# ============================================================
# 块规则
# ============================================================

def _make_block_rule(registry: ExtensionRegistry, config: HostConfig):
    """生成绑定了注册表和配置的 markdown-it 块规则"""

    def block_extensions(state: StateBlock, startLine: int, endLine: int, silent: bool) -> bool:
        # 缩进代码块
        if state.sCount[startLine] - state.blkIndent >= 4:
            return False

        match = ATTRIBUTE_LINE_PATTERN.match(_line_text(state, startLine))
        if not match:
            return False

        nextLine = startLine + 1
        if nextLine >= endLine or state.isEmpty(nextLine):
            return False
        if state.sCount[nextLine] < state.blkIndent:
            return False

        attrs = parse_block_attributes(match.group("attrlist"))
        name = attrs.get("style")
        if not name:
            return False

        delimiter = _line_text(state, nextLine)
        context = _delimited_context(delimiter)
        if context:
            contentStart = nextLine + 1
            closeLine = _find_closing_line(state, delimiter, contentStart, endLine)
            if closeLine is None:
                return False
            contentEnd = closeLine
            lastLine = closeLine + 1
        else:
            context = "paragraph"
            delimiter = ""
            contentStart = nextLine
            contentEnd = _find_paragraph_end(state, contentStart, endLine)
            lastLine = contentEnd

        processor = registry.find(name, context)
        if processor is None:
            return False
        if silent:
            return True

        logger.debug("Dispatching %s block (%s) to %s", name, context, type(processor).__name__)

        parent = create_block(None, "document", [], {})
        lines = _content_lines(state, contentStart, contentEnd)
        node = processor.process(parent, Reader(lines), dict(attrs))

        state.line = lastLine
        _emit_node(state, node, config, delimiter, [startLine, lastLine], [contentStart, contentEnd])
        return True

    return block_extensions


def _line_text(state: StateBlock, line: int) -> str:
    """获取去除缩进的行文本"""
    return state.src[state.bMarks[line] + state.tShift[line]:state.eMarks[line]].rstrip()


def _delimited_context(line: str) -> Optional[str]:
    """分隔符行对应的块上下文，不是分隔符时返回 None"""
    for pattern, context in DELIMITER_PATTERNS:
        if pattern.match(line):
            return context
    return None


def _find_closing_line(state: StateBlock, delimiter: str, start: int, endLine: int) -> Optional[int]:
    """查找闭合分隔符所在行，离开当前容器或到达末尾时返回 None"""
    for line in range(start, endLine):
        if not state.isEmpty(line) and state.sCount[line] < state.blkIndent:
            return None
        if _line_text(state, line) == delimiter and state.sCount[line] - state.blkIndent < 4:
            return line
    return None


def _find_paragraph_end(state: StateBlock, start: int, endLine: int) -> int:
    """段落内容一直延续到空行"""
    line = start
    while line < endLine and not state.isEmpty(line):
        if state.sCount[line] < state.blkIndent:
            break
        line += 1
    return line


def _content_lines(state: StateBlock, start: int, end: int) -> list[str]:
    """读取内容行，去除外层容器缩进"""
    if end <= start:
        return []
    return state.getLines(start, end, state.blkIndent, False).split("\n")


# ============================================================
# Token 输出
# ============================================================

def _emit_node(
    state: StateBlock,
    node: Block,
    config: HostConfig,
    markup: str,
    line_map: list[int],
    content_map: list[int],
) -> None:
    """
    把处理器返回的节点转换为 token

    结构：容器 > (标题) > 内容。警示块的标题为 caption，其他块为 title 属性。
    line_map 覆盖整个块，content_map 只覆盖内容行。
    """
    prefix = f"{node.context}_block"

    token = state.push(f"{prefix}_open", config.container_tag, 1)
    token.markup = markup
    token.map = line_map
    token.info = node.context
    token.meta = {"context": node.context, "attributes": dict(node.attributes)}
    token.attrSet("class", _container_class(node, config))
    if node.id:
        token.attrSet("id", node.id)

    title = node.caption if node.context == "admonition" else node.attr("title")
    if title:
        token = state.push(f"{prefix}_title_open", "div", 1)
        token.attrSet("class", config.title_class)
        token = state.push("inline", "", 0)
        token.content = title
        token.map = line_map
        token.children = []
        state.push(f"{prefix}_title_close", "div", -1)

    token = state.push(f"{prefix}_content_open", "div", 1)
    token.attrSet("class", config.content_class)
    CONTENT_EMITTERS[node.content_model](state, node.lines, content_map)
    state.push(f"{prefix}_content_close", "div", -1)

    token = state.push(f"{prefix}_close", config.container_tag, -1)
    token.markup = markup


def _container_class(node: Block, config: HostConfig) -> str:
    if node.context == "admonition":
        classes = [config.container_class, node.name]
    else:
        classes = [f"{node.context}block"]
    classes.append(node.role)
    return " ".join(c for c in classes if c)


def _emit_compound(state: StateBlock, lines: list[str], line_map: list[int]) -> None:
    # 子内容重新作为 Markdown 解析，支持嵌套块
    first = len(state.tokens)
    state.md.block.parse("\n".join(lines), state.md, state.env, state.tokens)

    # 子 token 的行号相对于内容片段，换算回源文件行号
    offset = line_map[0]
    for token in state.tokens[first:]:
        if token.map:
            token.map = [token.map[0] + offset, token.map[1] + offset]


def _emit_simple(state: StateBlock, lines: list[str], line_map: list[int]) -> None:
    if not lines:
        return
    token = state.push("paragraph_open", "p", 1)
    token.map = line_map
    token = state.push("inline", "", 0)
    token.content = "\n".join(lines)
    token.map = line_map
    token.children = []
    state.push("paragraph_close", "p", -1)


def _emit_verbatim(state: StateBlock, lines: list[str], line_map: list[int]) -> None:
    token = state.push("code_block", "code", 0)
    token.content = "\n".join(lines) + "\n"
    token.map = line_map


def _emit_raw(state: StateBlock, lines: list[str], line_map: list[int]) -> None:
    token = state.push("html_block", "", 0)
    token.content = "\n".join(lines) + "\n"
    token.map = line_map


def _emit_empty(state: StateBlock, lines: list[str], line_map: list[int]) -> None:
    pass


# 内容模型 -> token 输出函数
CONTENT_EMITTERS: dict[str, Callable[[StateBlock, list[str], list[int]], None]] = {
    "compound": _emit_compound,
    "simple": _emit_simple,
    "verbatim": _emit_verbatim,
    "raw": _emit_raw,
    "empty": _emit_empty,
}
