"""
Code generation module for the ABI to Solidity generator.

This module provides Solidity interface generation from parsed ABI nodes.
"""

from .context import CodeGenerationContext, GenerateSolidityOptions
from .base import BaseGenerator
from .function import (
    FunctionGenerator,
    ParameterContext,
    FUNCTION_PARAMETERS,
    EVENT_PARAMETERS,
    ERROR_PARAMETERS,
)
from .definition import DefinitionGenerator
from .contract import ContractGenerator
from .generator import SolidityCodeGenerator
from .formatter import FormatResult, format_solidity
from .diagnostics import GeneratorDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'CodeGenerationContext',
    'GenerateSolidityOptions',
    'BaseGenerator',
    'FunctionGenerator',
    'ParameterContext',
    'FUNCTION_PARAMETERS',
    'EVENT_PARAMETERS',
    'ERROR_PARAMETERS',
    'DefinitionGenerator',
    'ContractGenerator',
    'SolidityCodeGenerator',
    'FormatResult',
    'format_solidity',
    'GeneratorDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
