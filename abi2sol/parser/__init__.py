"""
Parser module for the ABI to Solidity generator.

This module provides AST node definitions, the parser implementation and
the node dispatch used by every tree walker.
"""

from .ast_nodes import (
    # Base
    ASTNode,
    # Root
    Abi,
    Entry,
    # Entries
    FunctionEntry,
    ConstructorEntry,
    FallbackEntry,
    ReceiveEntry,
    EventEntry,
    ErrorEntry,
    # Parameters
    Parameter,
)
from .parser import AbiParser, parse_abi, serialize_abi, serialize_entry, serialize_parameter
from .visitor import Visitor, dispatch
