"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains common utilities
used across all specialized generator classes in the code generation pipeline.
"""

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from ..parser.ast_nodes import Parameter
from ..type_system import tuple_signature


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared utilities for:
    - Indentation management
    - Tuple type resolution against the declaration table
    - Token joining
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The code generation context containing all state
        """
        self._ctx = ctx

    # =========================================================================
    # INDENTATION
    # =========================================================================

    def indent(self) -> str:
        """Return the current indentation string."""
        return self._ctx.indent()

    @property
    def indent_level(self) -> int:
        """Get the current indentation level."""
        return self._ctx.indent_level

    @indent_level.setter
    def indent_level(self, value: int):
        """Set the current indentation level."""
        self._ctx.indent_level = value

    # =========================================================================
    # TYPE RESOLUTION
    # =========================================================================

    def generate_type(self, parameter: Parameter) -> str:
        """Get the Solidity type for a parameter.

        Non-tuple types are emitted as written in the ABI. Tuple types have
        the `tuple` marker replaced by their struct identifier, keeping any
        array suffixes (`tuple[2][]` -> `S_0[2][]`).
        """
        if parameter.components is None:
            return parameter.type
        return self._ctx.resolve_tuple_type(
            parameter.type, tuple_signature(parameter.components)
        )

    # =========================================================================
    # FORMATTING
    # =========================================================================

    def _join(self, tokens: Iterable[str]) -> str:
        """Space-join tokens, dropping empty ones."""
        return ' '.join(token for token in tokens if token)
