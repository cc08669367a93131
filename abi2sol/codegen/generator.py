"""
Solidity code generator.

Ties the specialised generators together: header, struct declarations,
interface body and ABI footer, in that order.
"""

from typing import Optional

from .context import CodeGenerationContext, GenerateSolidityOptions
from .contract import ContractGenerator
from .definition import DefinitionGenerator
from .diagnostics import GeneratorDiagnostics
from .function import FunctionGenerator
from ..parser.ast_nodes import Abi
from ..type_system import Declarations


class SolidityCodeGenerator:
    """
    Generates a Solidity interface from a parsed ABI and its declaration table.

    The output is a pure function of the ABI, the table and the options.
    """

    def __init__(
        self,
        declarations: Declarations,
        options: Optional[GenerateSolidityOptions] = None,
        diagnostics: Optional[GeneratorDiagnostics] = None,
    ):
        self._ctx = CodeGenerationContext.from_declarations(
            declarations, options, diagnostics
        )
        self._func = FunctionGenerator(self._ctx)
        self._def = DefinitionGenerator(self._ctx)
        self._contract = ContractGenerator(self._ctx, self._func)

    @property
    def diagnostics(self) -> GeneratorDiagnostics:
        return self._ctx.diagnostics

    def generate(self, abi: Abi) -> str:
        """Generate the full Solidity source for an ABI."""
        sections = [
            self._contract.generate_header(abi),
            self._def.generate_all_structs(),
            self._contract.generate_interface(abi),
            self._contract.generate_autogenerated_notice(abi),
        ]
        return '\n\n'.join(section for section in sections if section)
