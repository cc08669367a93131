"""
Interface generation for ABI to Solidity generation.

This module renders the file-level pieces around the struct
declarations: the license/pragma header, the `interface` body, and the
footer that embeds the source ABI JSON.
"""

import json
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .function import FunctionGenerator

from .base import BaseGenerator
from ..parser.ast_nodes import (
    Abi,
    Parameter,
    FunctionEntry,
    EventEntry,
    ErrorEntry,
)
from ..parser.parser import serialize_abi
from ..type_system import requires_abi_encoder_v2


AUTOGENERATED_WARNING = '// !! THIS FILE WAS AUTOGENERATED BY abi2sol. SEE BELOW FOR SOURCE. !!'
AUTOGENERATED_NOTICE = '// THIS FILE WAS AUTOGENERATED FROM THE FOLLOWING ABI JSON:'


class ContractGenerator(BaseGenerator):
    """
    Generates the interface body and the file header/footer.

    Member rendering is delegated to the FunctionGenerator.
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        func_generator: 'FunctionGenerator',
    ):
        """
        Initialize the contract generator.

        Args:
            ctx: The code generation context
            func_generator: Generator for interface members
        """
        super().__init__(ctx)
        self._func = func_generator

    # =========================================================================
    # HEADER
    # =========================================================================

    def generate_header(self, abi: Abi) -> str:
        """Generate the license marker, warning and pragma lines."""
        options = self._ctx.options
        lines = [
            f'// SPDX-License-Identifier: {options.license}',
            AUTOGENERATED_WARNING,
            f'pragma solidity {options.solidity_version};',
        ]
        if self._requires_abi_encoder_v2(abi):
            lines.append('pragma experimental ABIEncoderV2;')
        return '\n'.join(lines)

    def _requires_abi_encoder_v2(self, abi: Abi) -> bool:
        if len(self._ctx.declarations) > 0:
            return True
        for entry in abi.entries:
            if any(requires_abi_encoder_v2(p) for p in _entry_parameters(entry)):
                return True
        return False

    # =========================================================================
    # INTERFACE
    # =========================================================================

    def generate_interface(self, abi: Abi) -> str:
        """Generate the `interface` block, one member per line.

        Entries that render to nothing (constructors) are left out.
        """
        lines = [f'{self.indent()}interface {self._ctx.options.name} {{']
        self.indent_level += 1
        for entry in abi.entries:
            member = self._func.generate_member(entry)
            if member:
                lines.append(f'{self.indent()}{member}')
        self.indent_level -= 1
        lines.append(f'{self.indent()}}}')
        return '\n'.join(lines)

    # =========================================================================
    # FOOTER
    # =========================================================================

    def generate_autogenerated_notice(self, abi: Abi) -> str:
        """Generate the footer comment embedding the ABI as compact JSON."""
        return '\n'.join([
            '',
            AUTOGENERATED_NOTICE,
            '/*',
            dump_abi_json(serialize_abi(abi)),
            '*/',
        ])


def dump_abi_json(abi_json) -> str:
    """Compact JSON that is safe to embed in a block comment.

    `*/` cannot appear inside the comment; `*\\/` decodes to the same string.
    """
    text = json.dumps(abi_json, separators=(',', ':'), ensure_ascii=False)
    return text.replace('*/', '*\\/')


def _entry_parameters(entry) -> List[Parameter]:
    """Parameters that appear in the rendered member for an entry."""
    if isinstance(entry, FunctionEntry):
        return entry.inputs + entry.outputs
    if isinstance(entry, (EventEntry, ErrorEntry)):
        return entry.inputs
    return []
