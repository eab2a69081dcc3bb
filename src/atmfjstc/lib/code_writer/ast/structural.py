from dataclasses import dataclass
from typing import Tuple, Union

from atmfjstc.lib.code_writer.ast.base import CodeWriterASTNode, check_child_nodes
from atmfjstc.lib.code_writer.ast.raw import as_node


NodeOrText = Union[CodeWriterASTNode, str]


@dataclass(frozen=True, repr=False)
class NodeSequence(CodeWriterASTNode):
    """
    Base for all nodes that hold an ordered sequence of children.

    The children can be supplied as any iterable, but are always stored as a tuple.
    """
    nodes: Tuple[CodeWriterASTNode, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'nodes', check_child_nodes(self.NODE_TYPE, self.nodes))

    def iter_children(self):
        yield from self.nodes

    def describe_fields(self):
        return dict(nodes=[node.describe() for node in self.nodes])


@dataclass(frozen=True, repr=False)
class NodeList(NodeSequence):
    """
    Writes its children one after the other, without adding any structure.
    """
    NODE_TYPE = 'NodeList'

    def write_to(self, writer):
        writer.write(*self.nodes)


@dataclass(frozen=True, repr=False)
class Line(NodeSequence):
    """
    Writes its children, then breaks the line. The next line starts at the current indentation.

    A `Line` with no children is just a line break.
    """
    NODE_TYPE = 'Line'

    def write_to(self, writer):
        writer.write(*self.nodes)
        writer.new_line()


@dataclass(frozen=True, repr=False)
class Statement(NodeSequence):
    """
    Like `Line`, but writes the statement terminator (``;`` unless configured otherwise) before breaking the line.
    """
    NODE_TYPE = 'Statement'

    def write_to(self, writer):
        writer.write(*self.nodes, writer.options.terminator)
        writer.new_line()


@dataclass(frozen=True, repr=False)
class Indent(NodeSequence):
    """
    Writes its children one indentation level deeper.

    Notes:

    - Entering the indent immediately writes one indent unit, as the cursor is assumed to continue on the current line
      (usually a line that has just been broken).
    - When leaving the indent, if the writer is at the start of a freshly broken line (the buffer ends in exactly a
      newline plus the deeper indentation), that line is moved back to the outer indentation. Blank lines written
      earlier keep their indentation.
    """
    NODE_TYPE = 'Indent'

    def write_to(self, writer):
        writer.indent()
        writer.write(*self.nodes)
        writer.dedent()


@dataclass(frozen=True, repr=False)
class Scope(NodeSequence):
    """
    A brace-delimited, indented block::

        {
          child 1
          child 2
        }

    The opening brace continues the current line, and the closing brace is written at the outer indentation without
    breaking the line after it. Children that already end with a line break (i.e. `Line` and `Statement` nodes) do not
    cause a blank line before the closing brace.
    """
    NODE_TYPE = 'Scope'

    def write_to(self, writer):
        writer.write('{', Indent((Line(), *self.nodes, NewLineIfNotLast())), '}')


@dataclass(frozen=True, repr=False)
class NewLineIfNotLast(CodeWriterASTNode):
    """
    Breaks the line, unless the writer is already at the start of a fresh line.
    """
    NODE_TYPE = 'NewLineIfNotLast'

    def write_to(self, writer):
        writer.new_line_if_not_last()

    def describe_fields(self):
        return dict()


@dataclass(frozen=True, repr=False)
class EmptyNode(CodeWriterASTNode):
    """
    A node that renders nothing. Useful for branches of template code that have nothing to contribute.
    """
    NODE_TYPE = 'Empty'

    def write_to(self, _writer):
        pass

    def describe_fields(self):
        return dict()


def node_list(*nodes: NodeOrText) -> NodeList:
    return NodeList(tuple(as_node(node) for node in nodes))


def line(*nodes: NodeOrText) -> Line:
    return Line(tuple(as_node(node) for node in nodes))


def statement(*nodes: NodeOrText) -> Statement:
    return Statement(tuple(as_node(node) for node in nodes))


def indent(*nodes: NodeOrText) -> Indent:
    return Indent(tuple(as_node(node) for node in nodes))


def scope(*nodes: NodeOrText) -> Scope:
    return Scope(tuple(as_node(node) for node in nodes))


def new_line_if_not_last() -> NewLineIfNotLast:
    return NewLineIfNotLast()


def empty() -> EmptyNode:
    return EmptyNode()
