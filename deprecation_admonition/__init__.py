"""
deprecation-admonition - DEPRECATED 块扩展

把作者标记为 DEPRECATED 的块改写为 "Deprecated" 警示块 (caution)。
"""

__version__ = "0.1.0"

from deprecation_admonition.core import Block, Reader, create_block
from deprecation_admonition.extensions import (
    BlockProcessor,
    DeprecationAdmonition,
    ExtensionError,
    ExtensionRegistry,
    RegistrationError,
    create_default_registry,
)

__all__ = [
    "__version__",
    "Block",
    "Reader",
    "create_block",
    "BlockProcessor",
    "DeprecationAdmonition",
    "ExtensionError",
    "ExtensionRegistry",
    "RegistrationError",
    "create_default_registry",
]
