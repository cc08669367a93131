"""
Code generation context for the Solidity code generator.

This module provides the generation options and a context class that
holds all state needed during code generation, separating state
management from the rendering logic.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .. import defaults
from ..type_system import Declarations, substitute_tuple
from .diagnostics import GeneratorDiagnostics


@dataclass
class GenerateSolidityOptions:
    """User-facing generation options."""
    name: str = defaults.NAME
    solidity_version: str = defaults.SOLIDITY_VERSION
    license: str = defaults.LICENSE
    prettier: bool = False
    prettier_command: Optional[Tuple[str, ...]] = None


@dataclass
class CodeGenerationContext:
    """
    Holds all state needed during Solidity code generation.

    The declaration table is read-only here; the context only adds
    indentation and diagnostics on top of it.
    """

    options: GenerateSolidityOptions = field(default_factory=GenerateSolidityOptions)
    declarations: Declarations = field(default_factory=lambda: Declarations({}))

    # Indentation state
    indent_level: int = 0
    indent_str: str = '  '

    # Diagnostics collector
    _diagnostics: Optional[GeneratorDiagnostics] = None

    @property
    def diagnostics(self) -> GeneratorDiagnostics:
        """Get the diagnostics collector, creating one if needed."""
        if self._diagnostics is None:
            self._diagnostics = GeneratorDiagnostics()
        return self._diagnostics

    def indent(self) -> str:
        """Return the current indentation string."""
        return self.indent_str * self.indent_level

    def resolve_tuple_type(self, type_str: str, signature: str) -> str:
        """Render a tuple type string with its struct identifier.

        Raises KeyError when the signature was never collected.
        """
        return substitute_tuple(type_str, self.declarations.identifier(signature))

    @classmethod
    def from_declarations(
        cls,
        declarations: Declarations,
        options: Optional[GenerateSolidityOptions] = None,
        diagnostics: Optional[GeneratorDiagnostics] = None,
    ) -> 'CodeGenerationContext':
        """
        Create a context from a collected declaration table.

        Args:
            declarations: Struct declarations discovered in the ABI
            options: Generation options (defaults when omitted)
            diagnostics: Collector shared with the caller, if any

        Returns:
            A new CodeGenerationContext instance
        """
        return cls(
            options=options or GenerateSolidityOptions(),
            declarations=declarations,
            _diagnostics=diagnostics,
        )
