"""
Node dispatch for ABI AST walkers.

`dispatch` routes a node to the visitor method for its kind. The node set
is closed, so an unrecognised node is a programming error and raises.
"""

from typing import Any, Generic, Optional, TypeVar

from .ast_nodes import (
    ASTNode,
    Abi,
    Parameter,
    FunctionEntry,
    ConstructorEntry,
    FallbackEntry,
    ReceiveEntry,
    EventEntry,
    ErrorEntry,
)


R = TypeVar('R')
C = TypeVar('C')


class Visitor(Generic[R, C]):
    """
    Base class for ABI AST visitors.

    Subclasses override one `visit_*` method per node kind. Each receives
    the node and the optional context threaded through `dispatch`.
    """

    def visit_abi(self, node: Abi, context: Optional[C] = None) -> R:
        raise NotImplementedError(f'{type(self).__name__} does not handle Abi')

    def visit_function_entry(self, node: FunctionEntry, context: Optional[C] = None) -> R:
        raise NotImplementedError(f'{type(self).__name__} does not handle FunctionEntry')

    def visit_constructor_entry(self, node: ConstructorEntry, context: Optional[C] = None) -> R:
        raise NotImplementedError(f'{type(self).__name__} does not handle ConstructorEntry')

    def visit_fallback_entry(self, node: FallbackEntry, context: Optional[C] = None) -> R:
        raise NotImplementedError(f'{type(self).__name__} does not handle FallbackEntry')

    def visit_receive_entry(self, node: ReceiveEntry, context: Optional[C] = None) -> R:
        raise NotImplementedError(f'{type(self).__name__} does not handle ReceiveEntry')

    def visit_event_entry(self, node: EventEntry, context: Optional[C] = None) -> R:
        raise NotImplementedError(f'{type(self).__name__} does not handle EventEntry')

    def visit_error_entry(self, node: ErrorEntry, context: Optional[C] = None) -> R:
        raise NotImplementedError(f'{type(self).__name__} does not handle ErrorEntry')

    def visit_parameter(self, node: Parameter, context: Optional[C] = None) -> R:
        raise NotImplementedError(f'{type(self).__name__} does not handle Parameter')


def dispatch(node: ASTNode, visitor: Visitor[R, C], context: Optional[C] = None) -> R:
    """Invoke the visitor method matching the node's kind."""
    if isinstance(node, Parameter):
        return visitor.visit_parameter(node, context)
    if isinstance(node, FunctionEntry):
        return visitor.visit_function_entry(node, context)
    if isinstance(node, EventEntry):
        return visitor.visit_event_entry(node, context)
    if isinstance(node, ErrorEntry):
        return visitor.visit_error_entry(node, context)
    if isinstance(node, ConstructorEntry):
        return visitor.visit_constructor_entry(node, context)
    if isinstance(node, FallbackEntry):
        return visitor.visit_fallback_entry(node, context)
    if isinstance(node, ReceiveEntry):
        return visitor.visit_receive_entry(node, context)
    if isinstance(node, Abi):
        return visitor.visit_abi(node, context)

    raise TypeError(f'Unsupported ABI node: {type(node).__name__}')
