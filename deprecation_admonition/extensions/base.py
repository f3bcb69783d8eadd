"""Block extension base classes.

This module provides the processor base class and the registry that the
host consults when it meets a named block.
"""

import importlib
import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

from deprecation_admonition.core.nodes import Block, BLOCK_CONTEXTS
from deprecation_admonition.core.reader import Reader

logger = logging.getLogger(__name__)

# 内置扩展模块，每个模块提供 register(registry) 钩子
BUILTIN_EXTENSIONS: tuple[str, ...] = (
    "deprecation_admonition.extensions.deprecation",
)


class ExtensionError(Exception):
    """扩展错误基类"""
    pass


class RegistrationError(ExtensionError):
    """处理器注册无效"""
    pass


class BlockProcessor(ABC):
    """Base class for block processors.

    Subclasses declare the block name they handle and the contexts
    (block delimiter forms) they apply to.
    """

    name: str = ""
    contexts: tuple[str, ...] = ("open", "paragraph")

    def applies_to(self, context: str) -> bool:
        """Whether this processor handles blocks in the given context."""
        return context in self.contexts

    @abstractmethod
    def process(self, parent: Any, reader: Reader, attrs: Mapping[str, str]) -> Block:
        """
        Turn a matched block into a new node.

        Args:
            parent: Enclosing node, passed through to create_block
            reader: Reader over the block's already-tokenized lines
            attrs: Attributes declared on the block

        Returns:
            The node the host splices in place of the block
        """
        pass


class ExtensionRegistry:
    """Registry for block processors.

    Processors are keyed by their exact, case-sensitive block name.
    每个实例独立保存注册表，不共享全局状态。
    """

    def __init__(self) -> None:
        self._processors: dict[str, BlockProcessor] = {}  # name -> processor

    def register(self, processor: BlockProcessor) -> None:
        """Register a processor by its block name (first registration wins)."""
        name = processor.name
        if not name:
            raise RegistrationError(
                f"{type(processor).__name__} does not declare a block name"
            )
        if not processor.contexts:
            raise RegistrationError(f"Processor for {name} declares no contexts")

        unknown = [c for c in processor.contexts if c not in BLOCK_CONTEXTS]
        if unknown:
            raise RegistrationError(
                f"Processor for {name} declares unknown contexts: {', '.join(unknown)}"
            )

        if name in self._processors:
            logger.debug("Block %s already registered, ignoring %s",
                         name, type(processor).__name__)
            return

        self._processors[name] = processor
        logger.debug("Registered block %s on contexts %s", name, ", ".join(processor.contexts))

    def unregister(self, name: str) -> None:
        """Unregister a processor by name."""
        self._processors.pop(name, None)

    def clear(self) -> None:
        """Clear all registered processors."""
        self._processors.clear()

    def get_processor(self, name: str) -> BlockProcessor | None:
        """Get a processor by block name."""
        return self._processors.get(name)

    def find(self, name: str, context: str) -> BlockProcessor | None:
        """Find the processor for a block name in the given context."""
        processor = self._processors.get(name)
        if processor is None or not processor.applies_to(context):
            return None
        return processor

    def get_all_processors(self) -> list[BlockProcessor]:
        """Get all registered processors."""
        return list(self._processors.values())

    def get_available_names(self) -> list[str]:
        """Get list of registered block names."""
        return list(self._processors.keys())


def create_default_registry() -> ExtensionRegistry:
    """Create a registry holding all built-in block extensions."""
    registry = ExtensionRegistry()

    # 动态导入内置扩展模块并调用其 register 钩子
    for module_name in BUILTIN_EXTENSIONS:
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            logger.warning("Failed to load extension %s: %s", module_name, e)
            continue
        module.register(registry)

    return registry
