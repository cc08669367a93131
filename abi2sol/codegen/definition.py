"""
Struct definition generation for ABI to Solidity generation.

This module renders the struct declarations collected from an ABI's
tuple parameters.
"""

from .base import BaseGenerator
from ..type_system import Component, Declaration


class DefinitionGenerator(BaseGenerator):
    """
    Generates Solidity struct definitions from the declaration table.

    Structs are emitted in table order; fields keep their ABI order and
    nested tuple fields resolve to the identifier of their own struct.
    """

    # =========================================================================
    # STRUCTS
    # =========================================================================

    def generate_struct(self, declaration: Declaration) -> str:
        """Generate a Solidity struct definition.

        Args:
            declaration: The collected declaration

        Returns:
            Solidity struct code
        """
        lines = []
        lines.append(f'{self.indent()}struct {declaration.identifier} {{')
        self.indent_level += 1
        for component in declaration.components:
            lines.append(f'{self.indent()}{self.generate_component(component)}')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}}')
        return '\n'.join(lines)

    def generate_component(self, component: Component) -> str:
        """Render one struct field as `<type> <name>;`."""
        if component.signature is None:
            field_type = component.type
        else:
            field_type = self._ctx.resolve_tuple_type(component.type, component.signature)
        return f'{field_type} {component.name};'

    # =========================================================================
    # COMBINED
    # =========================================================================

    def generate_all_structs(self) -> str:
        """Generate every struct in the declaration table, blank-line separated.

        Returns:
            Combined Solidity struct code (empty when there are no tuples)
        """
        return '\n\n'.join(
            self.generate_struct(declaration)
            for declaration in self._ctx.declarations.values()
        )
