"""
Diagnostic/warning system for the generator.

Collects and reports warnings about ABI constructs that were skipped,
renamed or degraded while generating the Solidity interface, so the CLI
can explain what it did without polluting the generated source.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List


class DiagnosticSeverity(Enum):
    """Severity levels for generator diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    construct: str = ''  # e.g., 'constructor', 'struct', 'prettier'

    def __str__(self) -> str:
        return f'[{self.severity.value}] {self.message} ({self.code})'


class GeneratorDiagnostics:
    """
    Collects generator warnings/diagnostics during code generation.

    Usage:
        diag = GeneratorDiagnostics()
        diag.warn_formatting_failed("prettier: command not found")
        # ... after generation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def count(self) -> int:
        return len(self._diagnostics)

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_formatting_failed(self, error: str) -> None:
        """Warn that the formatting pass failed and raw output was kept."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Formatting failed ({error}); emitting unformatted source.',
            construct='prettier',
        ))

    def warn_struct_name_collision(self, name: str, signature: str, identifier: str) -> None:
        """Warn that an inferred struct name was already taken by another shape."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'Struct name "{name}" is already taken; '
                    f'{signature} declared as {identifier}.',
            construct='struct',
        ))

    def info_constructor_skipped(self) -> None:
        """Info that the constructor entry has no interface counterpart."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message='Constructor skipped; interfaces cannot declare constructors.',
            construct='constructor',
        ))

    def info_struct_name_inferred(self, name: str, internal_type: str) -> None:
        """Info that a struct name was taken from the ABI's internalType."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message=f'Struct name "{name}" inferred from internalType "{internal_type}".',
            construct='struct',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if warnings:
            print(f'\nGenerator warnings ({len(warnings)}):', file=file)
            for w in warnings:
                print(f'  {w}', file=file)

        if infos and self._verbose:
            print(f'\nGenerator info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all diagnostics."""
        if not self._diagnostics:
            return 'No generator warnings.'

        by_construct: dict = {}
        for w in self.warnings:
            key = w.construct or 'other'
            by_construct[key] = by_construct.get(key, 0) + 1

        if not by_construct:
            return 'No generator warnings.'

        parts = [f'{count} {construct}' for construct, count in sorted(by_construct.items())]
        return f'Generator warnings: {", ".join(parts)}'
