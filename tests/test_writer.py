import unittest

from atmfjstc.lib.code_writer import CodeWriter, CodeWriterOptions, render, UnsupportedNodeTypeError
from atmfjstc.lib.code_writer.ast import text, line, scope


class CodeWriterTest(unittest.TestCase):
    def test_write_strings_and_nodes(self):
        writer = CodeWriter()
        writer.write('a', text('b'), 'c')

        self.assertEqual(writer.getvalue(), 'abc')
        self.assertEqual(str(writer), 'abc')

    def test_write_rejects_other_values(self):
        writer = CodeWriter()

        with self.assertRaises(UnsupportedNodeTypeError) as cm:
            writer.write('a', 42)

        self.assertIs(cm.exception.value_type, int)
        self.assertEqual(writer.getvalue(), 'a')

    def test_new_line_uses_indentation(self):
        writer = CodeWriter()
        writer.write('a')
        writer.indent()
        writer.write('b')
        writer.new_line()

        self.assertEqual(writer.getvalue(), 'a  b\n  ')

    def test_new_line_drops_unused_indent(self):
        writer = CodeWriter()
        writer.write('{')
        writer.indent()
        writer.new_line()

        self.assertEqual(writer.getvalue(), '{\n  ')

    def test_new_line_if_not_last_on_empty_buffer(self):
        writer = CodeWriter()
        writer.new_line_if_not_last()

        self.assertEqual(writer.getvalue(), '\n')

    def test_dedent_trims_fresh_line(self):
        writer = CodeWriter()
        writer.write('a')
        writer.indent()
        writer.write('b')
        writer.new_line()
        writer.dedent()

        self.assertEqual(writer.getvalue(), 'a  b\n')
        self.assertEqual(writer.indentation, '')

    def test_dedent_keeps_written_content(self):
        writer = CodeWriter()
        writer.write('a')
        writer.new_line()
        writer.indent()
        writer.write('b')
        writer.dedent()

        self.assertEqual(writer.getvalue(), 'a\n  b')

    def test_dedent_mid_line_keeps_indent_unit(self):
        writer = CodeWriter()
        writer.write('a')
        writer.indent()
        writer.dedent()
        writer.write('b')

        self.assertEqual(writer.getvalue(), 'a  b')
        self.assertEqual(writer.indentation, '')

    def test_dedent_without_indent(self):
        with self.assertRaises(RuntimeError):
            CodeWriter().dedent()

    def test_depth(self):
        writer = CodeWriter(CodeWriterOptions(indent_unit='    '))
        writer.indent()
        writer.indent()

        self.assertEqual(writer.depth, 2)
        self.assertEqual(writer.indentation, ' ' * 8)

    def test_ast_member(self):
        writer = CodeWriter()
        writer.write(writer.ast(['a=', ';'], [text('1')]))

        self.assertEqual(writer.getvalue(), 'a=1;')

    def test_fmt_member(self):
        writer = CodeWriter()
        writer.write(writer.fmt('a={};', '1'))

        self.assertEqual(writer.getvalue(), 'a=1;')


class RenderTest(unittest.TestCase):
    def test_render_function(self):
        self.assertEqual(render(line('a'), line('b')), 'a\nb\n')

    def test_node_render_method(self):
        self.assertEqual(scope(line('x')).render(), '{\n  x\n}')
        self.assertEqual(scope(line('x')).render(CodeWriterOptions(indent_unit='\t')), '{\n\tx\n}')

    def test_logs_debug_record(self):
        with self.assertLogs('atmfjstc.lib.code_writer.CodeWriter', level='DEBUG') as cm:
            render(line('a'))

        self.assertEqual(len(cm.records), 1)
        self.assertIn('2 characters', cm.records[0].getMessage())


class CodeWriterOptionsTest(unittest.TestCase):
    def test_defaults(self):
        options = CodeWriterOptions()

        self.assertEqual(options.indent_unit, '  ')
        self.assertEqual(options.newline, '\n')
        self.assertEqual(options.terminator, ';')

    def test_derive(self):
        options = CodeWriterOptions().derive(indent_unit='\t')

        self.assertEqual(options, CodeWriterOptions(indent_unit='\t'))
        self.assertEqual(options.derive(terminator='').terminator, '')
        self.assertEqual(options.derive(terminator='').indent_unit, '\t')

    def test_invalid_indent_unit(self):
        for unit in ['', 'ab', ' x ']:
            with self.subTest(unit=unit):
                with self.assertRaises(ValueError):
                    CodeWriterOptions(indent_unit=unit)

    def test_non_str_indent_unit(self):
        with self.assertRaises(TypeError):
            CodeWriterOptions(indent_unit=2)

    def test_invalid_newline(self):
        with self.assertRaises(ValueError):
            CodeWriterOptions(newline='|')


class PackageExportsTest(unittest.TestCase):
    def test_exports_nodes_not_submodules(self):
        import atmfjstc.lib.code_writer as package

        for name in ['Scope', 'scope', 'Callback', 'callback', 'CodeWriterASTNode', 'describe_node']:
            with self.subTest(name=name):
                self.assertTrue(hasattr(package, name))

        for name in ['base', 'raw', 'structural', 'dynamic']:
            with self.subTest(name=name):
                self.assertFalse(hasattr(package, name))
