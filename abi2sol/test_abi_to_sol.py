#!/usr/bin/env python3
"""
Unit tests for the abi2sol generator.

Run with: python3 -m pytest abi2sol/test_abi_to_sol.py
   or: python3 -m unittest abi2sol.test_abi_to_sol
"""

import contextlib
import io
import json
import os
import shutil
import tempfile
import unittest

from abi2sol import generate_solidity
from abi2sol.abi_to_sol import AbiToSolidityGenerator, main
from abi2sol.codegen import (
    GenerateSolidityOptions,
    GeneratorDiagnostics,
    DiagnosticSeverity,
    SolidityCodeGenerator,
    format_solidity,
)
from abi2sol.parser import (
    Abi,
    ASTNode,
    FunctionEntry,
    Parameter,
    Visitor,
    dispatch,
    parse_abi,
    serialize_abi,
)
from abi2sol.schema import validate_abi
from abi2sol.type_system import (
    Declarations,
    array_dimensions,
    collect_declarations,
    infer_struct_name,
    is_reference_type,
    requires_abi_encoder_v2,
    split_array_suffix,
    tuple_signature,
)


def normalize(text: str) -> str:
    """Collapse all whitespace runs to single spaces."""
    return ' '.join(text.split())


def func(name, inputs=None, outputs=None, state_mutability='nonpayable'):
    return {
        'type': 'function',
        'name': name,
        'inputs': inputs or [],
        'outputs': outputs or [],
        'stateMutability': state_mutability,
    }


def param(name, type_, components=None, **extra):
    data = {'name': name, 'type': type_}
    if components is not None:
        data['components'] = components
    data.update(extra)
    return data


def extract_footer_json(output: str):
    body = output.rsplit('/*\n', 1)[1].rsplit('\n*/', 1)[0]
    return json.loads(body)


POSITION = [param('amount', 'uint256'), param('owner', 'address')]


class TestTypeStrings(unittest.TestCase):
    """Test the ABI type-string helpers."""

    def test_split_array_suffix(self):
        """Test that array suffixes are split from the base type."""
        self.assertEqual(split_array_suffix('uint256'), ('uint256', ''))
        self.assertEqual(split_array_suffix('tuple[2][]'), ('tuple', '[2][]'))
        self.assertEqual(split_array_suffix('bytes32[]'), ('bytes32', '[]'))

    def test_array_dimensions(self):
        """Test that array dimensions are counted."""
        self.assertEqual(array_dimensions('address'), 0)
        self.assertEqual(array_dimensions('uint8[]'), 1)
        self.assertEqual(array_dimensions('tuple[][3][]'), 3)

    def test_reference_types(self):
        """Test which types need a data location."""
        for type_ in ('tuple', 'tuple[]', 'uint256[]', 'address[4]', 'bytes', 'string'):
            self.assertTrue(is_reference_type(type_), type_)
        for type_ in ('uint256', 'int8', 'address', 'bool', 'bytes32', 'bytes1'):
            self.assertFalse(is_reference_type(type_), type_)

    def test_requires_abi_encoder_v2(self):
        """Test detection of parameters the v1 encoder rejects."""
        self.assertFalse(requires_abi_encoder_v2(Parameter('a', 'uint256[]')))
        self.assertFalse(requires_abi_encoder_v2(Parameter('a', 'string')))
        self.assertTrue(requires_abi_encoder_v2(Parameter('a', 'string[]')))
        self.assertTrue(requires_abi_encoder_v2(Parameter('a', 'uint256[][]')))
        self.assertTrue(requires_abi_encoder_v2(Parameter('a', 'tuple', [])))


class TestStructuralSignature(unittest.TestCase):
    """Test tuple signatures ignore names and follow component types."""

    def test_signature_ignores_names(self):
        a = parse_abi([func('f', [param('p', 'tuple', POSITION)])])
        b = parse_abi([func('g', [param('q', 'tuple', [
            param('x', 'uint256'), param('y', 'address'),
        ])])])
        self.assertEqual(
            tuple_signature(a.entries[0].inputs[0].components),
            tuple_signature(b.entries[0].inputs[0].components),
        )

    def test_nested_signature(self):
        """Test that nested tuple components contribute their own signature and suffix."""
        abi = parse_abi([func('f', [param('p', 'tuple', [
            param('id', 'uint256'),
            param('flags', 'tuple[]', [param('who', 'address'), param('on', 'bool')]),
        ])])])
        self.assertEqual(
            tuple_signature(abi.entries[0].inputs[0].components),
            '(uint256,(address,bool)[])',
        )


class TestDeclarationCollector(unittest.TestCase):
    """Test struct discovery and deduplication."""

    def test_no_tuples_gives_empty_table(self):
        abi = parse_abi([
            func('transfer', [param('to', 'address'), param('amount', 'uint256')],
                 [param('', 'bool')]),
            {'type': 'event', 'name': 'Ping', 'inputs': []},
            {'type': 'receive', 'stateMutability': 'payable'},
        ])
        self.assertEqual(len(collect_declarations(abi)), 0)

    def test_components_on_non_tuple_type_ignored(self):
        """Test that a malformed non-tuple parameter with components declares nothing."""
        abi_json = [func('f', [param('a', 'uint256', [param('x', 'bool')])],
                         state_mutability='view')]
        abi = parse_abi(abi_json)

        self.assertIsNone(abi.entries[0].inputs[0].components)
        self.assertEqual(len(collect_declarations(abi)), 0)

        source = generate_solidity(abi_json).split('/*')[0]
        self.assertNotIn('struct', source)
        self.assertNotIn('ABIEncoderV2', source)
        self.assertIn('function f( uint256 a ) external view ;', normalize(source))

    def test_identical_tuples_share_one_declaration(self):
        """Test that the same shape in two functions collapses to one struct."""
        abi = parse_abi([
            func('open', [param('position', 'tuple', POSITION)]),
            func('close', [param('p', 'tuple', [
                param('size', 'uint256'), param('trader', 'address'),
            ])]),
        ])
        declarations = collect_declarations(abi)

        self.assertEqual(len(declarations), 1)
        self.assertEqual(declarations.identifier('(uint256,address)'), 'S_0')

        output = generate_solidity(abi)
        self.assertIn('function open( S_0 memory position ) external ;', normalize(output))
        self.assertIn('function close( S_0 memory p ) external ;', normalize(output))

    def test_different_order_gives_two_declarations(self):
        """Test that same field names with different type order are different structs."""
        abi = parse_abi([
            func('f', [param('p', 'tuple', [param('a', 'uint256'), param('b', 'address')])]),
            func('g', [param('p', 'tuple', [param('a', 'address'), param('b', 'uint256')])]),
        ])
        declarations = collect_declarations(abi)

        self.assertEqual(list(declarations), ['(uint256,address)', '(address,uint256)'])
        self.assertEqual(
            [d.identifier for d in declarations.values()],
            ['S_0', 'S_1'],
        )

    def test_nested_tuples_declared_before_their_users(self):
        abi = parse_abi([func('f', [param('order', 'tuple', [
            param('items', 'tuple[]', [param('sku', 'uint256')]),
            param('buyer', 'address'),
        ])])])
        declarations = collect_declarations(abi)

        self.assertEqual(list(declarations), ['(uint256)', '((uint256)[],address)'])
        outer = declarations['((uint256)[],address)']
        self.assertEqual(outer.identifier, 'S_1')
        self.assertEqual(outer.components[0].signature, '(uint256)')
        self.assertIsNone(outer.components[1].signature)

    def test_discovery_order_inputs_before_outputs(self):
        abi = parse_abi([
            func('a', [param('x', 'tuple', [param('v', 'bool')])],
                 [param('y', 'tuple', [param('v', 'bytes32')])]),
            {'type': 'event', 'name': 'E', 'inputs': [
                param('z', 'tuple', [param('v', 'int8')], indexed=False),
            ]},
        ])
        self.assertEqual(list(collect_declarations(abi)), ['(bool)', '(bytes32)', '(int8)'])

    def test_tables_are_independent_per_run(self):
        """Test that the synthetic counter restarts for every collection."""
        abi = parse_abi([func('f', [param('p', 'tuple', POSITION)])])
        first = collect_declarations(abi)
        second = collect_declarations(abi)
        self.assertEqual(first.identifier('(uint256,address)'), 'S_0')
        self.assertEqual(second.identifier('(uint256,address)'), 'S_0')

    def test_unresolved_signature_raises(self):
        declarations = Declarations({})
        with self.assertRaises(KeyError):
            declarations.identifier('(uint256)')


class TestStructNameInference(unittest.TestCase):
    """Test struct names taken from internalType."""

    def test_infer_struct_name(self):
        self.assertEqual(infer_struct_name('struct Pool.Key'), 'Key')
        self.assertEqual(infer_struct_name('struct Order[]'), 'Order')
        self.assertEqual(infer_struct_name('struct A.B.Info[2][]'), 'Info')
        self.assertIsNone(infer_struct_name('uint256'))
        self.assertIsNone(infer_struct_name(None))
        self.assertIsNone(infer_struct_name(''))

    def test_inferred_name_used_and_kept(self):
        """Test that the first occurrence names the struct and later ones reuse it."""
        abi = [
            func('swap', [param('key', 'tuple', POSITION, internalType='struct Pool.Key')]),
            func('quote', [param('k', 'tuple', POSITION, internalType='struct Other')]),
        ]
        output = generate_solidity(abi)
        source = output.split('/*')[0]

        self.assertIn('struct Key {', source)
        self.assertNotIn('struct Other', source)
        self.assertIn('function quote( Key memory k ) external ;', normalize(output))

    def test_name_collision_falls_back_to_synthetic(self):
        abi = parse_abi([
            func('f', [param('a', 'tuple', [param('x', 'uint256')], internalType='struct Info')]),
            func('g', [param('b', 'tuple', [param('x', 'address')], internalType='struct Lib.Info')]),
        ])
        diagnostics = GeneratorDiagnostics()
        declarations = collect_declarations(abi, diagnostics)

        self.assertEqual(declarations.identifier('(uint256)'), 'Info')
        self.assertEqual(declarations.identifier('(address)'), 'S_0')
        self.assertEqual([d.code for d in diagnostics.warnings], ['W002'])

    def test_inferred_name_matching_interface_falls_back(self):
        """Test that a struct never takes the interface's own name."""
        abi = [func('f', [param('k', 'tuple', [param('x', 'uint256')],
                                internalType='struct Pool.Pool')], state_mutability='view')]
        generator = AbiToSolidityGenerator(GenerateSolidityOptions(name='Pool'))
        output = generator.generate(abi)
        source = output.split('/*')[0]

        self.assertIn('interface Pool {', source)
        self.assertNotIn('struct Pool {', source)
        self.assertIn('struct S_0 {', source)
        self.assertIn('function f( S_0 memory k ) external view ;', normalize(source))
        self.assertEqual([d.code for d in generator.diagnostics.warnings], ['W002'])

    def test_reserved_identifiers_skipped(self):
        abi = parse_abi([
            func('f', [param('a', 'tuple', [param('x', 'uint256')], internalType='struct Vault')]),
        ])
        declarations = collect_declarations(abi, reserved=('Vault',))
        self.assertEqual(declarations.identifier('(uint256)'), 'S_0')

    def test_synthetic_names_skip_inferred_ones(self):
        abi = parse_abi([
            func('f', [param('a', 'tuple', [param('x', 'uint256')], internalType='struct S_0')]),
            func('g', [param('b', 'tuple', [param('x', 'address')])]),
        ])
        declarations = collect_declarations(abi)
        self.assertEqual(declarations.identifier('(uint256)'), 'S_0')
        self.assertEqual(declarations.identifier('(address)'), 'S_1')


class TestFunctionGeneration(unittest.TestCase):
    """Test rendering of function entries."""

    def test_view_function_without_structs(self):
        """Test the canonical single-argument view function."""
        abi = [{
            'type': 'function', 'name': 'f',
            'inputs': [{'name': 'a', 'type': 'uint256'}],
            'outputs': [], 'stateMutability': 'view',
        }]
        output = generate_solidity(abi)

        self.assertIn('function f( uint256 a ) external view ;', normalize(output))
        self.assertNotIn('struct', output)

    def test_nonpayable_has_no_mutability_keyword(self):
        output = normalize(generate_solidity([func('set', [param('value', 'uint256')])]))
        self.assertIn('function set( uint256 value ) external ;', output)
        self.assertNotIn('nonpayable', output.split('/*')[0])

    def test_pure_and_payable_are_emitted(self):
        output = normalize(generate_solidity([
            func('calc', [param('x', 'int256')], [param('', 'int256')], 'pure'),
            func('deposit', state_mutability='payable'),
        ]))
        self.assertIn('function calc( int256 x ) external pure returns ( int256 ) ;', output)
        self.assertIn('function deposit( ) external payable ;', output)

    def test_returns_clause(self):
        output = normalize(generate_solidity([
            func('name', outputs=[param('', 'string')], state_mutability='view'),
        ]))
        self.assertIn('function name( ) external view returns ( string memory ) ;', output)

    def test_location_qualifiers(self):
        """Test that reference types get memory and value types don't."""
        output = normalize(generate_solidity([func('batch', [
            param('ids', 'uint256[]'),
            param('data', 'bytes'),
            param('note', 'string'),
            param('to', 'address'),
            param('amount', 'uint256'),
            param('hash', 'bytes32'),
        ])]))
        self.assertIn(
            'function batch( uint256[] memory ids, bytes memory data, string memory note, '
            'address to, uint256 amount, bytes32 hash ) external ;',
            output,
        )

    def test_tuple_array_keeps_suffix(self):
        output = normalize(generate_solidity([
            func('fill', [param('orders', 'tuple[2][]', POSITION)]),
        ]))
        self.assertIn('function fill( S_0[2][] memory orders ) external ;', output)

    def test_legacy_constant_flag_is_view(self):
        output = normalize(generate_solidity([{
            'constant': True, 'name': 'owner', 'inputs': [],
            'outputs': [{'name': '', 'type': 'address'}], 'payable': False,
        }]))
        self.assertIn('function owner( ) external view returns ( address ) ;', output)


class TestSpecialEntries(unittest.TestCase):
    """Test constructor, fallback, receive, event and error entries."""

    def test_constructor_renders_nothing(self):
        generator = AbiToSolidityGenerator()
        output = generator.generate([
            {'type': 'constructor', 'inputs': [param('owner', 'address')],
             'stateMutability': 'nonpayable'},
        ])
        interface = output.split('interface MyInterface {')[1].split('}')[0]

        self.assertEqual(interface.strip(), '')
        self.assertEqual([d.code for d in generator.diagnostics.diagnostics], ['I001'])

    def test_fallback(self):
        payable = normalize(generate_solidity([{'type': 'fallback', 'stateMutability': 'payable'}]))
        plain = normalize(generate_solidity([{'type': 'fallback', 'stateMutability': 'nonpayable'}]))
        self.assertIn('fallback () external payable ;', payable)
        self.assertIn('fallback () external ;', plain)

    def test_receive(self):
        output = normalize(generate_solidity([{'type': 'receive', 'stateMutability': 'payable'}]))
        self.assertIn('receive () external payable;', output)
        self.assertNotIn('payable ;', output)

    def test_event_indexed_inputs(self):
        """Test that only indexed event inputs get the indexed keyword."""
        output = normalize(generate_solidity([{
            'type': 'event', 'name': 'Transfer', 'anonymous': False,
            'inputs': [
                param('from', 'address', indexed=True),
                param('value', 'uint256', indexed=False),
            ],
        }]))
        self.assertIn('event Transfer( address indexed from, uint256 value ) ;', output)

    def test_event_never_gets_location(self):
        output = normalize(generate_solidity([{
            'type': 'event', 'name': 'Logged', 'anonymous': True,
            'inputs': [param('message', 'string', indexed=False)],
        }]))
        self.assertIn('event Logged( string message ) anonymous ;', output)

    def test_error_entry(self):
        output = normalize(generate_solidity([{
            'type': 'error', 'name': 'Unauthorized',
            'inputs': [param('caller', 'address'), param('reason', 'string')],
        }]))
        self.assertIn('error Unauthorized( address caller, string reason ) ;', output)


class TestOutputAssembly(unittest.TestCase):
    """Test header, struct block, interface body and footer."""

    def test_header_defaults(self):
        output = generate_solidity([func('f')])
        lines = output.splitlines()

        self.assertEqual(lines[0], '// SPDX-License-Identifier: UNLICENSED')
        self.assertTrue(lines[1].startswith('// !! THIS FILE WAS AUTOGENERATED'))
        self.assertEqual(lines[2], 'pragma solidity >=0.7.0 <0.9.0;')
        self.assertNotIn('ABIEncoderV2', output)

    def test_header_options(self):
        output = generate_solidity(
            [func('f')], name='IVault', solidity_version='^0.8.20', license='MIT',
        )
        self.assertIn('// SPDX-License-Identifier: MIT', output)
        self.assertIn('pragma solidity ^0.8.20;', output)
        self.assertIn('interface IVault {', output)

    def test_encoder_v2_pragma_when_needed(self):
        self.assertIn(
            'pragma experimental ABIEncoderV2;',
            generate_solidity([func('f', [param('p', 'tuple', POSITION)])]),
        )
        self.assertIn(
            'pragma experimental ABIEncoderV2;',
            generate_solidity([func('f', [param('names', 'string[]')])]),
        )

    def test_struct_block(self):
        output = generate_solidity([func('f', [param('order', 'tuple', [
            param('items', 'tuple[]', [param('sku', 'uint256')]),
            param('buyer', 'address'),
        ])])])

        self.assertIn('struct S_0 {\n  uint256 sku;\n}', output)
        self.assertIn('struct S_1 {\n  S_0[] items;\n  address buyer;\n}', output)
        self.assertLess(output.index('struct S_0'), output.index('struct S_1'))
        self.assertLess(output.index('struct S_1'), output.index('interface MyInterface'))
        self.assertIn('function f( S_1 memory order ) external ;', normalize(output))

    def test_interface_members_one_per_line(self):
        output = generate_solidity([
            func('a'),
            {'type': 'constructor', 'inputs': []},
            func('b'),
        ])
        self.assertIn(
            'interface MyInterface {\n'
            '  function a( ) external ;\n'
            '  function b( ) external ;\n'
            '}',
            output,
        )

    def test_footer_round_trips(self):
        """Test that the embedded ABI JSON parses back to the input."""
        abi = [
            func('f', [param('p', 'tuple', POSITION, internalType='struct A*/B')]),
            {'type': 'event', 'name': 'E', 'anonymous': False,
             'inputs': [param('x', 'uint256', indexed=True)]},
        ]
        output = generate_solidity(abi)

        self.assertIn('// THIS FILE WAS AUTOGENERATED FROM THE FOLLOWING ABI JSON:', output)
        self.assertEqual(extract_footer_json(output), abi)

    def test_footer_from_artifact(self):
        abi = [func('f')]
        output = generate_solidity({'contractName': 'X', 'abi': abi})
        self.assertEqual(extract_footer_json(output), abi)

    def test_deterministic(self):
        abi = [
            func('f', [param('p', 'tuple', POSITION)], [param('q', 'tuple[]', POSITION)]),
            {'type': 'event', 'name': 'E', 'inputs': [param('p', 'tuple', POSITION, indexed=False)]},
        ]
        self.assertEqual(generate_solidity(abi), generate_solidity(abi))

    def test_abi_built_from_nodes(self):
        """Test generation from nodes without source JSON."""
        abi = Abi(entries=[FunctionEntry('ping', state_mutability='view')])
        output = generate_solidity(abi)

        self.assertIn('function ping( ) external view ;', normalize(output))
        self.assertEqual(extract_footer_json(output), serialize_abi(abi))
        self.assertEqual(extract_footer_json(output)[0]['name'], 'ping')


class TestErrors(unittest.TestCase):
    """Test fatal error paths."""

    def test_unknown_entry_type(self):
        with self.assertRaises(ValueError):
            parse_abi([{'type': 'modifier', 'name': 'onlyOwner'}])

    def test_non_list_document(self):
        with self.assertRaises(ValueError):
            parse_abi({'contractName': 'X'})

    def test_dispatch_unknown_node(self):
        class Unknown(ASTNode):
            pass

        with self.assertRaises(TypeError):
            dispatch(Unknown(), Visitor())

    def test_unresolved_tuple_at_render(self):
        """Test that a table missing a tuple shape is a hard failure."""
        abi = parse_abi([func('f', [param('p', 'tuple', POSITION)])])
        generator = SolidityCodeGenerator(Declarations({}))
        with self.assertRaises(KeyError):
            generator.generate(abi)


class TestFormatter(unittest.TestCase):
    """Test the best-effort formatting pass."""

    def test_failing_command(self):
        result = format_solidity('contract X {}', command=['false'])
        self.assertFalse(result.ok)
        self.assertEqual(result.text, 'contract X {}')
        self.assertTrue(result.error)

    def test_missing_command(self):
        result = format_solidity('contract X {}', command=['abi2sol-no-such-formatter'])
        self.assertFalse(result.ok)
        self.assertEqual(result.text, 'contract X {}')

    @unittest.skipUnless(shutil.which('cat'), 'needs cat')
    def test_successful_command(self):
        result = format_solidity('contract X {}\n', command=['cat'])
        self.assertTrue(result.ok)
        self.assertEqual(result.text, 'contract X {}\n')

    def test_generation_falls_back_to_unformatted(self):
        abi = [func('f', [param('a', 'uint256')])]
        generator = AbiToSolidityGenerator(GenerateSolidityOptions(
            prettier=True, prettier_command=('abi2sol-no-such-formatter',),
        ))

        self.assertEqual(generator.generate(abi), generate_solidity(abi))
        self.assertEqual([d.code for d in generator.diagnostics.warnings], ['W001'])


class TestSchemaValidation(unittest.TestCase):
    """Test JSON Schema validation of raw ABIs."""

    def test_valid_abi(self):
        abi = [
            func('f', [param('p', 'tuple', POSITION)], [param('', 'bool')], 'view'),
            {'type': 'event', 'name': 'E', 'anonymous': False,
             'inputs': [param('x', 'uint256', indexed=True)]},
            {'type': 'error', 'name': 'Bad', 'inputs': []},
            {'type': 'receive', 'stateMutability': 'payable'},
        ]
        self.assertEqual(validate_abi(abi), [])

    def test_invalid_type_string(self):
        errors = validate_abi([func('f', [param('a', 'uint257')])])
        self.assertTrue(errors)
        self.assertTrue(any(e.startswith('/0/inputs/0/type:') for e in errors), errors)

    def test_tuple_without_components(self):
        errors = validate_abi([func('f', [param('a', 'tuple')])])
        self.assertTrue(any(e.startswith('/0/inputs/0:') for e in errors), errors)

    def test_errors_sorted_by_numeric_index(self):
        abi = [func(f'f{i}', [param('a', 'uint256')]) for i in range(11)]
        abi[2] = func('bad2', [param('a', 'uint257')])
        abi[10] = func('bad10', [param('a', 'uint257')])
        errors = validate_abi(abi)

        pointers = [e.split(':', 1)[0] for e in errors]
        self.assertRegex(pointers[0], r'^/2(/|$)')
        self.assertRegex(pointers[-1], r'^/10(/|$)')


class TestCli(unittest.TestCase):
    """Test the command-line entry point."""

    def _write_abi(self, abi) -> str:
        fd, path = tempfile.mkstemp(suffix='.json')
        with os.fdopen(fd, 'w') as f:
            f.write(abi if isinstance(abi, str) else json.dumps(abi))
        self.addCleanup(os.remove, path)
        return path

    def _run(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_generates_to_stdout(self):
        path = self._write_abi([func('f', [param('a', 'uint256')], state_mutability='view')])
        code, out, _ = self._run(['IToken', '-i', path, '-L', 'MIT'])

        self.assertEqual(code, 0)
        self.assertIn('interface IToken {', out)
        self.assertIn('// SPDX-License-Identifier: MIT', out)

    def test_validation_failure(self):
        path = self._write_abi([func('f', [param('a', 'uint257')])])
        code, out, err = self._run(['--validate', '-i', path])

        self.assertEqual(code, 1)
        self.assertEqual(out, '')
        self.assertIn('failed validation', err)

    def test_invalid_json(self):
        path = self._write_abi('not json')
        code, _, err = self._run(['-i', path])

        self.assertEqual(code, 1)
        self.assertIn('could not read ABI', err)


class TestDiagnostics(unittest.TestCase):
    """Test the diagnostics collector."""

    def test_diagnostics_collect_warnings(self):
        diag = GeneratorDiagnostics()
        diag.warn_formatting_failed('prettier: not found')
        diag.info_constructor_skipped()

        self.assertEqual(diag.count, 2)
        self.assertEqual(len(diag.warnings), 1)
        self.assertEqual(diag.diagnostics[1].severity, DiagnosticSeverity.INFO)

    def test_diagnostics_summary(self):
        diag = GeneratorDiagnostics()
        diag.warn_struct_name_collision('Info', '(address)', 'S_0')
        self.assertEqual(diag.get_summary(), 'Generator warnings: 1 struct')

    def test_diagnostics_print_summary(self):
        diag = GeneratorDiagnostics(verbose=True)
        diag.info_struct_name_inferred('Key', 'struct Pool.Key')
        out = io.StringIO()
        diag.print_summary(file=out)
        self.assertIn('(I002)', out.getvalue())

    def test_diagnostics_no_warnings(self):
        diag = GeneratorDiagnostics()
        self.assertEqual(diag.get_summary(), 'No generator warnings.')
        diag.info_constructor_skipped()
        self.assertEqual(diag.get_summary(), 'No generator warnings.')


if __name__ == '__main__':
    unittest.main()
