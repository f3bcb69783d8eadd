"""DEPRECATED block extension.

Rewrites a block declared as ``[DEPRECATED]`` into a caution admonition
captioned "Deprecated" with the ``deprecated`` role. The block's content is
carried over unchanged.
"""

from types import MappingProxyType
from typing import Any, Mapping

from deprecation_admonition.core.nodes import Block, create_block
from deprecation_admonition.core.reader import Reader
from deprecation_admonition.extensions.base import BlockProcessor, ExtensionRegistry

# Fixed presentation attributes, always override the block's own values
DEPRECATION_ATTRIBUTES: Mapping[str, str] = MappingProxyType({
    "name": "caution",
    "caption": "Deprecated",
    "role": "deprecated",
})


class DeprecationAdmonition(BlockProcessor):
    """Turns DEPRECATED blocks into caution admonitions."""

    name = "DEPRECATED"
    contexts = ("example", "paragraph", "open")

    def process(self, parent: Any, reader: Reader, attrs: Mapping[str, str]) -> Block:
        attrs = {**attrs, **DEPRECATION_ATTRIBUTES}
        return create_block(parent, "admonition", reader.lines, attrs, content_model="compound")


def register(registry: ExtensionRegistry) -> None:
    """Register the DEPRECATED block on a registry."""
    registry.register(DeprecationAdmonition())
