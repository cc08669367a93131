"""
Types module for the ABI to Solidity generator.

This module provides the ABI type-string helpers and the struct
declaration table built from an ABI's tuple parameters.
"""

from .declarations import (
    Component,
    Declaration,
    Declarations,
    DeclarationCollector,
    collect_declarations,
    infer_struct_name,
)
from .mappings import (
    split_array_suffix,
    array_dimensions,
    is_array_type,
    is_tuple_type,
    is_reference_type,
    substitute_tuple,
    type_signature,
    tuple_signature,
    requires_abi_encoder_v2,
    DYNAMIC_BASE_TYPES,
    REFERENCE_LOCATION,
    DEFAULT_STATE_MUTABILITY,
)

__all__ = [
    'Component',
    'Declaration',
    'Declarations',
    'DeclarationCollector',
    'collect_declarations',
    'infer_struct_name',
    'split_array_suffix',
    'array_dimensions',
    'is_array_type',
    'is_tuple_type',
    'is_reference_type',
    'substitute_tuple',
    'type_signature',
    'tuple_signature',
    'requires_abi_encoder_v2',
    'DYNAMIC_BASE_TYPES',
    'REFERENCE_LOCATION',
    'DEFAULT_STATE_MUTABILITY',
]
