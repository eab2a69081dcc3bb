import unittest

from atmfjstc.lib.code_writer import CodeWriter, render, UnsupportedNodeTypeError
from atmfjstc.lib.code_writer.ast import Callback, text, line, scope, empty, callback


class CallbackTest(unittest.TestCase):
    def test_single_node(self):
        self.assertEqual(render(callback(lambda: line('a'))), 'a\n')

    def test_node_list(self):
        self.assertEqual(render(callback(lambda: [line('a'), text('b')])), 'a\nb')

    def test_generator(self):
        node = callback(lambda: (line(str(i)) for i in range(3)))

        self.assertEqual(node.nodes, (line('0'), line('1'), line('2')))
        self.assertEqual(render(node), '0\n1\n2\n')
        self.assertEqual(render(node), '0\n1\n2\n')

    def test_branching(self):
        def branch(flag):
            return callback(lambda: line('yes') if flag else empty())

        self.assertEqual(render(scope(branch(True), branch(False))), '{\n  yes\n}')

    def test_producer_called_once_at_construction(self):
        calls = []

        def producer():
            calls.append(1)
            return text('x')

        node = Callback(producer)

        self.assertEqual(len(calls), 1)

        render(node)
        render(node, node)

        self.assertEqual(len(calls), 1)

    def test_producer_called_in_construction_order(self):
        order = []

        def produce(name):
            def producer():
                order.append(name)
                return text(name)

            return producer

        tree = scope(callback(produce('a')), callback(produce('b')))

        self.assertEqual(order, ['a', 'b'])
        self.assertEqual(render(tree), '{\n  ab\n}')

    def test_non_node_result(self):
        node = callback(lambda: 42)

        with self.assertRaises(UnsupportedNodeTypeError) as cm:
            render(node)

        self.assertIs(cm.exception.value_type, int)
        self.assertIsInstance(cm.exception, TypeError)

    def test_string_result(self):
        with self.assertRaises(UnsupportedNodeTypeError):
            render(callback(lambda: 'text'))

    def test_bad_element_writes_nothing(self):
        writer = CodeWriter()
        writer.write(text('before'))

        with self.assertRaises(UnsupportedNodeTypeError) as cm:
            writer.write(callback(lambda: [text('a'), None]))

        self.assertIs(cm.exception.value_type, type(None))
        self.assertEqual(writer.getvalue(), 'before')

    def test_error_message_names_type(self):
        with self.assertRaises(UnsupportedNodeTypeError) as cm:
            render(callback(lambda: [3.5]))

        self.assertEqual(str(cm.exception), "Unsupported node type: float")
