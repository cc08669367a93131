"""
Member generation for ABI to Solidity generation.

This module renders the members of the generated interface: functions,
events, errors and the special fallback/receive/constructor entries, plus
the parameters they declare.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from .base import BaseGenerator
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
from ..type_system import (
    DEFAULT_STATE_MUTABILITY,
    REFERENCE_LOCATION,
    is_reference_type,
)


@dataclass
class ParameterContext:
    """Per-construct parameter rendering rules."""
    parameter_modifiers: Callable[[Parameter], List[str]]


def function_parameter_modifiers(parameter: Parameter) -> List[str]:
    """External function parameters of reference type need a data location."""
    if is_reference_type(parameter.type):
        return [REFERENCE_LOCATION]
    return []


def event_parameter_modifiers(parameter: Parameter) -> List[str]:
    return ['indexed'] if parameter.indexed else []


def error_parameter_modifiers(parameter: Parameter) -> List[str]:
    return []


FUNCTION_PARAMETERS = ParameterContext(function_parameter_modifiers)
EVENT_PARAMETERS = ParameterContext(event_parameter_modifiers)
ERROR_PARAMETERS = ParameterContext(error_parameter_modifiers)


class FunctionGenerator(BaseGenerator, Visitor[str, ParameterContext]):
    """
    Generates Solidity interface members from ABI entries.

    This class handles:
    - Function signatures with mutability and returns clauses
    - Events (indexed inputs, anonymous flag)
    - Custom errors
    - fallback/receive declarations
    - Constructors (rendered as nothing)
    """

    def generate_member(self, entry) -> str:
        """Render one ABI entry; empty string for entries with no interface form."""
        return dispatch(entry, self)

    def visit_abi(self, node: Abi, context: Optional[ParameterContext] = None) -> str:
        raise TypeError('Abi is not an interface member')

    # =========================================================================
    # FUNCTIONS
    # =========================================================================

    def visit_function_entry(
        self, node: FunctionEntry, context: Optional[ParameterContext] = None
    ) -> str:
        returns = ''
        if node.outputs:
            returns = self._join([
                'returns (',
                self._generate_parameters(node.outputs, FUNCTION_PARAMETERS),
                ')',
            ])

        return self._join([
            f'function {node.name}(',
            self._generate_parameters(node.inputs, FUNCTION_PARAMETERS),
            ') external',
            self._generate_state_mutability(node.state_mutability),
            returns,
            ';',
        ])

    def visit_constructor_entry(
        self, node: ConstructorEntry, context: Optional[ParameterContext] = None
    ) -> str:
        # Interfaces don't have constructors
        self._ctx.diagnostics.info_constructor_skipped()
        return ''

    def visit_fallback_entry(
        self, node: FallbackEntry, context: Optional[ParameterContext] = None
    ) -> str:
        return self._join([
            'fallback () external',
            'payable' if node.state_mutability == 'payable' else '',
            ';',
        ])

    def visit_receive_entry(
        self, node: ReceiveEntry, context: Optional[ParameterContext] = None
    ) -> str:
        return 'receive () external payable;'

    # =========================================================================
    # EVENTS AND ERRORS
    # =========================================================================

    def visit_event_entry(
        self, node: EventEntry, context: Optional[ParameterContext] = None
    ) -> str:
        return self._join([
            f'event {node.name}(',
            self._generate_parameters(node.inputs, EVENT_PARAMETERS),
            ')',
            'anonymous' if node.anonymous else '',
            ';',
        ])

    def visit_error_entry(
        self, node: ErrorEntry, context: Optional[ParameterContext] = None
    ) -> str:
        return self._join([
            f'error {node.name}(',
            self._generate_parameters(node.inputs, ERROR_PARAMETERS),
            ')',
            ';',
        ])

    # =========================================================================
    # PARAMETERS
    # =========================================================================

    def visit_parameter(
        self, node: Parameter, context: Optional[ParameterContext] = None
    ) -> str:
        if context is None:
            raise TypeError(f'Parameter "{node.name}" rendered outside of an entry')
        return self._join([
            self.generate_type(node),
            *context.parameter_modifiers(node),
            node.name,
        ])

    def _generate_parameters(self, parameters: List[Parameter], context: ParameterContext) -> str:
        return ', '.join(dispatch(p, self, context) for p in parameters)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _generate_state_mutability(self, state_mutability: str) -> str:
        """Mutability keyword, omitted for the nonpayable default."""
        if state_mutability and state_mutability != DEFAULT_STATE_MUTABILITY:
            return state_mutability
        return ''
