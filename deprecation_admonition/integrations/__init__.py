"""
Integrations - 宿主引擎绑定

把块扩展注册表接入具体的文档引擎。
"""

from deprecation_admonition.integrations.markdown import (
    block_extensions_plugin,
    create_markdown,
    render_markdown,
    HostConfig,
)

__all__ = [
    "block_extensions_plugin",
    "create_markdown",
    "render_markdown",
    "HostConfig",
]
