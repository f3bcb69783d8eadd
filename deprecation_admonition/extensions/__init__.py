"""Block extension system for deprecation-admonition.

Processors are registered on an ExtensionRegistry by block name and the
contexts they apply to. create_default_registry() loads the built-in ones.
"""

from deprecation_admonition.extensions.base import (
    BlockProcessor,
    ExtensionError,
    ExtensionRegistry,
    RegistrationError,
    create_default_registry,
)
from deprecation_admonition.extensions.deprecation import (
    DEPRECATION_ATTRIBUTES,
    DeprecationAdmonition,
)

__all__ = [
    "BlockProcessor",
    "ExtensionError",
    "ExtensionRegistry",
    "RegistrationError",
    "create_default_registry",
    "DEPRECATION_ATTRIBUTES",
    "DeprecationAdmonition",
]
