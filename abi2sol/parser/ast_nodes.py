"""
AST node definitions for contract ABI documents.

This module contains the dataclasses representing nodes in the tree
produced by the ABI parser. The set of entry kinds is closed: it mirrors
the `type` values the ABI JSON format allows.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    pass


# =============================================================================
# PARAMETERS
# =============================================================================

@dataclass
class Parameter(ASTNode):
    """Represents an input/output parameter or a tuple component.

    `components` is only set for tuple types (`tuple`, `tuple[]`, `tuple[2][]`, ...).
    `indexed` is only meaningful for event inputs.
    """
    name: str
    type: str
    components: Optional[List['Parameter']] = None
    indexed: bool = False
    internal_type: Optional[str] = None

    @property
    def is_tuple(self) -> bool:
        return self.components is not None


# =============================================================================
# ENTRY NODES
# =============================================================================

@dataclass
class FunctionEntry(ASTNode):
    """Represents a `function` entry."""
    name: str
    inputs: List[Parameter] = field(default_factory=list)
    outputs: List[Parameter] = field(default_factory=list)
    state_mutability: str = 'nonpayable'  # 'pure', 'view', 'nonpayable', 'payable'


@dataclass
class ConstructorEntry(ASTNode):
    """Represents the `constructor` entry."""
    inputs: List[Parameter] = field(default_factory=list)
    state_mutability: str = 'nonpayable'


@dataclass
class FallbackEntry(ASTNode):
    """Represents the `fallback` entry."""
    state_mutability: str = 'nonpayable'


@dataclass
class ReceiveEntry(ASTNode):
    """Represents the `receive` entry (always payable)."""
    state_mutability: str = 'payable'


@dataclass
class EventEntry(ASTNode):
    """Represents an `event` entry."""
    name: str
    inputs: List[Parameter] = field(default_factory=list)
    anonymous: bool = False


@dataclass
class ErrorEntry(ASTNode):
    """Represents a custom `error` entry."""
    name: str
    inputs: List[Parameter] = field(default_factory=list)


Entry = Union[
    FunctionEntry,
    ConstructorEntry,
    FallbackEntry,
    ReceiveEntry,
    EventEntry,
    ErrorEntry,
]


# =============================================================================
# ROOT NODE
# =============================================================================

@dataclass
class Abi(ASTNode):
    """Root node representing an entire ABI document.

    `source` keeps the decoded JSON exactly as it was handed to the parser,
    so the generated file can embed it unchanged.
    """
    entries: List[Entry] = field(default_factory=list)
    source: Any = None
