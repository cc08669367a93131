"""
ABI type strings and their Solidity rendering properties.

This module contains the type-string grammar helpers (base type plus
array suffixes), structural signatures for tuple parameters, and the
predicates the code generator uses to pick parameter modifiers.
"""

import re
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..parser.ast_nodes import Parameter


# =============================================================================
# TYPE GRAMMAR CONSTANTS
# =============================================================================

TUPLE_MARKER = 'tuple'

# Dynamically-sized primitives; passed by reference like arrays and structs
DYNAMIC_BASE_TYPES = ('bytes', 'string')

# Location qualifier for reference types in external function signatures
REFERENCE_LOCATION = 'memory'

# Mutability that Solidity treats as the default and never spells out
DEFAULT_STATE_MUTABILITY = 'nonpayable'

_ARRAY_SUFFIX_RE = re.compile(r'((?:\[\d*\])*)$')
_ARRAY_DIMENSION_RE = re.compile(r'\[\d*\]')


# =============================================================================
# TYPE STRING FUNCTIONS
# =============================================================================

def split_array_suffix(type_str: str) -> Tuple[str, str]:
    """Split `uint256[2][]` into (`uint256`, `[2][]`)."""
    match = _ARRAY_SUFFIX_RE.search(type_str)
    suffix = match.group(1) if match else ''
    return type_str[:len(type_str) - len(suffix)], suffix


def array_dimensions(type_str: str) -> int:
    """Count the array suffixes of a type string."""
    _, suffix = split_array_suffix(type_str)
    return len(_ARRAY_DIMENSION_RE.findall(suffix))


def is_array_type(type_str: str) -> bool:
    return '[' in type_str


def is_tuple_type(type_str: str) -> bool:
    return type_str.startswith(TUPLE_MARKER)


def is_reference_type(type_str: str) -> bool:
    """Whether a parameter of this type needs a data location in an external signature."""
    return (
        is_tuple_type(type_str)
        or is_array_type(type_str)
        or type_str in DYNAMIC_BASE_TYPES
    )


def substitute_tuple(type_str: str, identifier: str) -> str:
    """Replace the tuple marker with a struct identifier, keeping array suffixes."""
    return type_str.replace(TUPLE_MARKER, identifier, 1)


# =============================================================================
# STRUCTURAL SIGNATURES
# =============================================================================

def type_signature(param: 'Parameter') -> str:
    """Canonical type of a single parameter.

    Non-tuple parameters are their type string. Tuple parameters are the
    signature of their components followed by the array suffixes, so
    `tuple[]` with components (uint256, address) is `(uint256,address)[]`.
    """
    if param.components is None:
        return param.type
    _, suffix = split_array_suffix(param.type)
    return tuple_signature(param.components) + suffix


def tuple_signature(components: List['Parameter']) -> str:
    """Canonical structural signature of a tuple's component sequence.

    Component names are excluded; only types and their order matter.
    """
    return '(' + ','.join(type_signature(c) for c in components) + ')'


# =============================================================================
# ENCODER REQUIREMENTS
# =============================================================================

def requires_abi_encoder_v2(param: 'Parameter') -> bool:
    """Whether a parameter can only be encoded by ABI coder v2.

    Structs, nested arrays and arrays of dynamic primitives are rejected by
    the v1 encoder in external signatures.
    """
    if param.components is not None:
        return True
    base, _ = split_array_suffix(param.type)
    dims = array_dimensions(param.type)
    if dims >= 2:
        return True
    return dims >= 1 and base in DYNAMIC_BASE_TYPES
