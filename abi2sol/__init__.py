"""
ABI to Solidity interface generator

This package generates Solidity interface source code from a contract ABI.

Module Structure:
- parser/: ABI AST nodes, the JSON -> AST parser and node dispatch
- type_system/: ABI type strings and the struct declaration table
- codegen/: Solidity generation (SolidityCodeGenerator and helpers)
- schema/: JSON Schema validation of raw ABI documents
- abi_to_sol.py: Main entry point and CLI

Usage:
    from abi2sol import generate_solidity

    source = generate_solidity(abi_json, name='IERC20')
"""

__version__ = '0.1.0'

# Re-export main classes for convenience
from .abi_to_sol import (
    AbiToSolidityGenerator,
    generate_solidity,
)
from .codegen import GenerateSolidityOptions, SolidityCodeGenerator
from .parser import AbiParser, parse_abi
from .type_system import collect_declarations

__all__ = [
    'AbiToSolidityGenerator',
    'generate_solidity',
    'GenerateSolidityOptions',
    'SolidityCodeGenerator',
    'AbiParser',
    'parse_abi',
    'collect_declarations',
]
