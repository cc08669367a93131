#!/usr/bin/env python3
"""
ABI to Solidity interface generator

Reads a contract ABI (JSON) and writes a Solidity `interface` with the
same external surface. Tuple parameters become `struct` declarations,
deduplicated by shape.

Key features:
- Structural struct dedup (same component types -> same struct)
- Struct names from `internalType` when the ABI carries them
- Legacy `constant`/`payable` flags understood
- Generated file embeds the source ABI so it can be regenerated

Usage:
    abi2sol MyToken < MyToken.abi.json
    python -m abi2sol.abi_to_sol --validate -i artifact.json IVault
"""

import json
import sys
from typing import Any, Optional, Sequence, TextIO, Union

from . import defaults
from .codegen import (
    GenerateSolidityOptions,
    GeneratorDiagnostics,
    SolidityCodeGenerator,
    format_solidity,
)
from .parser import Abi, parse_abi
from .type_system import collect_declarations


class AbiToSolidityGenerator:
    """Main generator class that orchestrates parsing, collection and rendering."""

    def __init__(
        self,
        options: Optional[GenerateSolidityOptions] = None,
        verbose: bool = False,
    ):
        self.options = options or GenerateSolidityOptions()
        self.diagnostics = GeneratorDiagnostics(verbose=verbose)

    def generate(self, abi: Union[Abi, Any]) -> str:
        """Generate Solidity source for an ABI (parsed or decoded JSON)."""
        if not isinstance(abi, Abi):
            abi = parse_abi(abi)

        declarations = collect_declarations(
            abi, self.diagnostics, reserved=(self.options.name,)
        )
        generator = SolidityCodeGenerator(declarations, self.options, self.diagnostics)
        generated = generator.generate(abi)

        if not self.options.prettier:
            return generated

        result = format_solidity(generated, self.options.prettier_command)
        if not result.ok:
            self.diagnostics.warn_formatting_failed(result.error)
            return generated
        return result.text


def generate_solidity(
    abi: Union[Abi, Any],
    name: str = defaults.NAME,
    solidity_version: str = defaults.SOLIDITY_VERSION,
    license: str = defaults.LICENSE,
    prettier: bool = False,
    prettier_command: Optional[Sequence[str]] = None,
) -> str:
    """Generate a Solidity interface for an ABI.

    Args:
        abi: Parsed Abi, a decoded ABI list, or an artifact dict with an `abi` key
        name: Interface identifier
        solidity_version: Version constraint for `pragma solidity`
        license: SPDX license identifier
        prettier: Run the external formatter (falls back to raw output on failure)
        prettier_command: Formatter argv override

    Returns:
        The generated Solidity source
    """
    options = GenerateSolidityOptions(
        name=name,
        solidity_version=solidity_version,
        license=license,
        prettier=prettier,
        prettier_command=tuple(prettier_command) if prettier_command else None,
    )
    return AbiToSolidityGenerator(options).generate(abi)


# =============================================================================
# CLI INTERFACE
# =============================================================================

def read_abi(stream: TextIO) -> Any:
    """Read and decode ABI JSON from a stream."""
    return json.loads(stream.read())


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse

    from . import __version__

    parser = argparse.ArgumentParser(
        prog='abi2sol',
        description='Generate a Solidity interface from a contract ABI read from stdin'
    )
    parser.add_argument('name', nargs='?', default=defaults.NAME,
                        help=f'Name of generated interface. Default: {defaults.NAME}')
    parser.add_argument('-V', '--solidity-version', default=defaults.SOLIDITY_VERSION,
                        help=f'Version of Solidity (for pragma). Default: {defaults.SOLIDITY_VERSION}')
    parser.add_argument('-L', '--license', default=defaults.LICENSE,
                        help=f'SPDX license identifier. Default: {defaults.LICENSE}')
    parser.add_argument('-i', '--input', metavar='FILE',
                        help='Read the ABI from FILE instead of stdin')
    parser.add_argument('--validate', action='store_true',
                        help='Validate JSON before starting')
    parser.add_argument('--prettier', action='store_true',
                        help=f'Format output with prettier-plugin-solidity '
                             f'(command from ${defaults.PRETTIER_ENV_VAR} if set)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print informational diagnostics to stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser.parse_args(argv)

    try:
        if args.input:
            with open(args.input, 'r') as f:
                abi_json = read_abi(f)
        else:
            abi_json = read_abi(sys.stdin)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: could not read ABI: {e}", file=sys.stderr)
        return 1

    if args.validate:
        from .schema import validate_abi

        document = abi_json['abi'] if isinstance(abi_json, dict) and 'abi' in abi_json else abi_json
        errors = validate_abi(document)
        if errors:
            print(f"Error: ABI failed validation ({len(errors)} error(s)):", file=sys.stderr)
            for error in errors:
                print(f"  {error}", file=sys.stderr)
            return 1

    options = GenerateSolidityOptions(
        name=args.name,
        solidity_version=args.solidity_version,
        license=args.license,
        prettier=args.prettier,
    )
    generator = AbiToSolidityGenerator(options, verbose=args.verbose)

    try:
        source = generator.generate(abi_json)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(source)
    generator.diagnostics.print_summary()
    return 0


if __name__ == '__main__':
    sys.exit(main())
