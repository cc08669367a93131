"""
ABI parser implementation.

The AbiParser converts decoded ABI JSON (lists and dicts, as produced by
`json.load`) into the typed AST defined in ast_nodes. Legacy fields from
pre-0.4.21 compilers (`constant`, `payable`) are normalised into
`stateMutability` on the way in.
"""

from typing import Any, Dict, List, Optional

from .ast_nodes import (
    Abi,
    Entry,
    Parameter,
    FunctionEntry,
    ConstructorEntry,
    FallbackEntry,
    ReceiveEntry,
    EventEntry,
    ErrorEntry,
)


ENTRY_TYPES = ('function', 'constructor', 'fallback', 'receive', 'event', 'error')

TUPLE_TYPE = 'tuple'


class AbiParser:
    """
    Parser for decoded ABI JSON documents.

    Accepts either a bare ABI list or a compiled artifact object that
    carries the ABI under an `abi` key.
    """

    def __init__(self, source: Any):
        self.source = source

    def parse(self) -> Abi:
        """Parse the whole document into an Abi node."""
        entries_json = self.source
        if isinstance(entries_json, dict) and 'abi' in entries_json:
            entries_json = entries_json['abi']

        if not isinstance(entries_json, list):
            raise ValueError(
                f"Expected an ABI list, got {type(entries_json).__name__}"
            )

        abi = Abi(source=entries_json)
        for index, entry_json in enumerate(entries_json):
            abi.entries.append(self.parse_entry(entry_json, index))
        return abi

    # =========================================================================
    # ENTRIES
    # =========================================================================

    def parse_entry(self, entry: Dict[str, Any], index: int = 0) -> Entry:
        """Parse a single top-level ABI entry."""
        if not isinstance(entry, dict):
            raise ValueError(f"ABI entry #{index} is not an object: {entry!r}")

        # `type` may be omitted, in which case it defaults to function
        kind = entry.get('type', 'function')

        if kind == 'function':
            return FunctionEntry(
                name=entry.get('name', ''),
                inputs=self.parse_parameters(entry.get('inputs')),
                outputs=self.parse_parameters(entry.get('outputs')),
                state_mutability=self._state_mutability(entry),
            )
        if kind == 'constructor':
            return ConstructorEntry(
                inputs=self.parse_parameters(entry.get('inputs')),
                state_mutability=self._state_mutability(entry),
            )
        if kind == 'fallback':
            return FallbackEntry(state_mutability=self._state_mutability(entry))
        if kind == 'receive':
            return ReceiveEntry(state_mutability=entry.get('stateMutability', 'payable'))
        if kind == 'event':
            return EventEntry(
                name=entry.get('name', ''),
                inputs=self.parse_parameters(entry.get('inputs')),
                anonymous=bool(entry.get('anonymous', False)),
            )
        if kind == 'error':
            return ErrorEntry(
                name=entry.get('name', ''),
                inputs=self.parse_parameters(entry.get('inputs')),
            )

        raise ValueError(
            f"ABI entry #{index} has unsupported type {kind!r} "
            f"(expected one of {', '.join(ENTRY_TYPES)})"
        )

    def _state_mutability(self, entry: Dict[str, Any]) -> str:
        """Read stateMutability, falling back to the legacy payable/constant flags."""
        if entry.get('stateMutability'):
            return entry['stateMutability']
        if entry.get('payable'):
            return 'payable'
        if entry.get('constant'):
            return 'view'
        return 'nonpayable'

    # =========================================================================
    # PARAMETERS
    # =========================================================================

    def parse_parameters(self, params: Optional[List[Dict[str, Any]]]) -> List[Parameter]:
        """Parse an inputs/outputs/components list (missing lists are empty)."""
        if not params:
            return []
        return [self.parse_parameter(p) for p in params]

    def parse_parameter(self, param: Dict[str, Any]) -> Parameter:
        """Parse a single parameter, recursing into tuple components."""
        if not isinstance(param, dict):
            raise ValueError(f"ABI parameter is not an object: {param!r}")

        param_type = param.get('type') or ''

        # Components on a non-tuple type are ignored
        components = None
        if param_type.startswith(TUPLE_TYPE) and param.get('components') is not None:
            components = self.parse_parameters(param['components'])

        return Parameter(
            name=param.get('name') or '',
            type=param_type,
            components=components,
            indexed=bool(param.get('indexed', False)),
            internal_type=param.get('internalType'),
        )


def parse_abi(source: Any) -> Abi:
    """Parse decoded ABI JSON into an Abi node."""
    return AbiParser(source).parse()


# =============================================================================
# SERIALIZATION
# =============================================================================

def serialize_parameter(param: Parameter) -> Dict[str, Any]:
    """Convert a Parameter back to its ABI JSON form."""
    data: Dict[str, Any] = {'name': param.name, 'type': param.type}
    if param.internal_type is not None:
        data['internalType'] = param.internal_type
    if param.components is not None:
        data['components'] = [serialize_parameter(c) for c in param.components]
    if param.indexed:
        data['indexed'] = True
    return data


def serialize_entry(entry: Entry) -> Dict[str, Any]:
    """Convert an entry node back to its ABI JSON form."""
    if isinstance(entry, FunctionEntry):
        return {
            'type': 'function',
            'name': entry.name,
            'inputs': [serialize_parameter(p) for p in entry.inputs],
            'outputs': [serialize_parameter(p) for p in entry.outputs],
            'stateMutability': entry.state_mutability,
        }
    if isinstance(entry, ConstructorEntry):
        return {
            'type': 'constructor',
            'inputs': [serialize_parameter(p) for p in entry.inputs],
            'stateMutability': entry.state_mutability,
        }
    if isinstance(entry, (FallbackEntry, ReceiveEntry)):
        kind = 'fallback' if isinstance(entry, FallbackEntry) else 'receive'
        return {'type': kind, 'stateMutability': entry.state_mutability}
    if isinstance(entry, EventEntry):
        return {
            'type': 'event',
            'name': entry.name,
            'inputs': [serialize_parameter(p) for p in entry.inputs],
            'anonymous': entry.anonymous,
        }
    if isinstance(entry, ErrorEntry):
        return {
            'type': 'error',
            'name': entry.name,
            'inputs': [serialize_parameter(p) for p in entry.inputs],
        }
    raise TypeError(f'Unsupported ABI node: {type(entry).__name__}')


def serialize_abi(abi: Abi) -> List[Dict[str, Any]]:
    """The ABI JSON for a document: the parsed source when known, else rebuilt from nodes."""
    if abi.source is not None:
        return abi.source
    return [serialize_entry(entry) for entry in abi.entries]
