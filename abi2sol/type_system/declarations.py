"""
Struct declarations discovered in an ABI.

The DeclarationCollector performs a first pass over the ABI, before code
generation, to find every tuple shape and give it a struct identifier.
Tuples are keyed by structural signature, so identical shapes used by
different functions (or under different field names) share one struct.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, TYPE_CHECKING

from ..parser.ast_nodes import (
    Abi,
    Parameter,
    FunctionEntry,
    ConstructorEntry,
    FallbackEntry,
    ReceiveEntry,
    EventEntry,
    ErrorEntry,
)
from ..parser.visitor import Visitor, dispatch
from .mappings import tuple_signature

if TYPE_CHECKING:
    from ..codegen.diagnostics import GeneratorDiagnostics


SYNTHETIC_PREFIX = 'S_'

# internalType looks like "struct Lib.Name[]" or "struct Name"
_STRUCT_INTERNAL_TYPE_RE = re.compile(
    r'^struct\s+(?:[A-Za-z_$][\w$]*\.)*([A-Za-z_$][\w$]*)(?:\[\d*\])*$'
)


@dataclass(frozen=True)
class Component:
    """A struct field. `signature` is set when the field is itself a tuple."""
    name: str
    type: str
    signature: Optional[str] = None


@dataclass(frozen=True)
class Declaration:
    """A struct declaration for one tuple shape."""
    identifier: str
    components: List[Component] = field(default_factory=list)


class Declarations(Mapping):
    """
    Read-only, insertion-ordered table of signature -> Declaration.

    Iteration order is the order in which the collector discovered each
    shape, which is also the order the structs are emitted in.
    """

    def __init__(self, declarations: Dict[str, Declaration]):
        self._declarations = dict(declarations)

    def __getitem__(self, signature: str) -> Declaration:
        return self._declarations[signature]

    def __iter__(self) -> Iterator[str]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def __repr__(self) -> str:
        return f'Declarations({self._declarations!r})'

    def identifier(self, signature: str) -> str:
        """Get the struct identifier for a signature."""
        try:
            return self._declarations[signature].identifier
        except KeyError:
            raise KeyError(f'No struct declaration for tuple signature {signature}') from None


class DeclarationCollector(Visitor[None, None]):
    """
    Discovers struct declarations from an ABI.

    One collector owns one table and one synthetic-name counter; create a
    new collector for every generation run.

    `reserved` names identifiers already taken in the output (the interface
    name); an inferred struct name matching one falls back to a synthetic
    identifier.
    """

    def __init__(
        self,
        diagnostics: Optional['GeneratorDiagnostics'] = None,
        reserved: Iterable[str] = (),
    ):
        self._declarations: Dict[str, Declaration] = {}
        self._identifiers: Set[str] = set(reserved)
        self._counter = 0
        self._diagnostics = diagnostics

    def collect(self, abi: Abi) -> Declarations:
        """Walk the whole ABI and return the finished table."""
        dispatch(abi, self)
        return Declarations(self._declarations)

    # =========================================================================
    # ENTRIES
    # =========================================================================

    def visit_abi(self, node: Abi, context=None) -> None:
        for entry in node.entries:
            dispatch(entry, self)

    def visit_function_entry(self, node: FunctionEntry, context=None) -> None:
        self._visit_parameters(node.inputs)
        self._visit_parameters(node.outputs)

    def visit_constructor_entry(self, node: ConstructorEntry, context=None) -> None:
        self._visit_parameters(node.inputs)

    def visit_fallback_entry(self, node: FallbackEntry, context=None) -> None:
        pass

    def visit_receive_entry(self, node: ReceiveEntry, context=None) -> None:
        pass

    def visit_event_entry(self, node: EventEntry, context=None) -> None:
        self._visit_parameters(node.inputs)

    def visit_error_entry(self, node: ErrorEntry, context=None) -> None:
        self._visit_parameters(node.inputs)

    def _visit_parameters(self, parameters: List[Parameter]) -> None:
        for parameter in parameters:
            dispatch(parameter, self)

    # =========================================================================
    # PARAMETERS
    # =========================================================================

    def visit_parameter(self, node: Parameter, context=None) -> None:
        if node.components is None:
            return

        # Components first, so nested structs are declared before their users
        self._visit_parameters(node.components)

        signature = tuple_signature(node.components)
        if signature in self._declarations:
            return

        components = [
            Component(
                name=component.name,
                type=component.type,
                signature=(
                    tuple_signature(component.components)
                    if component.components is not None else None
                ),
            )
            for component in node.components
        ]
        identifier = self._choose_identifier(node, signature)
        self._declarations[signature] = Declaration(identifier, components)
        self._identifiers.add(identifier)

    def _choose_identifier(self, node: Parameter, signature: str) -> str:
        name = infer_struct_name(node.internal_type)
        if name is None:
            return self._next_synthetic_identifier()

        if name in self._identifiers:
            identifier = self._next_synthetic_identifier()
            if self._diagnostics:
                self._diagnostics.warn_struct_name_collision(name, signature, identifier)
            return identifier

        if self._diagnostics:
            self._diagnostics.info_struct_name_inferred(name, node.internal_type)
        return name

    def _next_synthetic_identifier(self) -> str:
        identifier = f'{SYNTHETIC_PREFIX}{self._counter}'
        self._counter += 1
        # An inferred name may already look like a synthetic one
        while identifier in self._identifiers:
            identifier = f'{SYNTHETIC_PREFIX}{self._counter}'
            self._counter += 1
        return identifier


def infer_struct_name(internal_type: Optional[str]) -> Optional[str]:
    """Extract the struct name from an internalType like `struct Lib.Name[]`."""
    if not internal_type:
        return None
    match = _STRUCT_INTERNAL_TYPE_RE.match(internal_type.strip())
    if not match:
        return None
    return match.group(1)


def collect_declarations(
    abi: Abi,
    diagnostics: Optional['GeneratorDiagnostics'] = None,
    reserved: Iterable[str] = (),
) -> Declarations:
    """Discover every struct declaration used by an ABI."""
    return DeclarationCollector(diagnostics, reserved).collect(abi)
