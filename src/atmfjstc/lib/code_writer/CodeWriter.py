import logging

from typing import Callable, Optional, Union

from atmfjstc.lib.code_writer.CodeWriterOptions import CodeWriterOptions
from atmfjstc.lib.code_writer.ast.base import CodeWriterASTNode
from atmfjstc.lib.code_writer.ast.structural import NodeList
from atmfjstc.lib.code_writer.errors import UnsupportedNodeTypeError
from atmfjstc.lib.code_writer.interpolation import interpolate, interpolate_format


LOG = logging.getLogger(__name__)


class CodeWriter:
    """
    Accumulates the text produced by rendering a code writer AST, keeping track of the current indentation.

    Nodes call the `write`, `new_line`, `indent` etc. methods on the writer as they render themselves. Client code
    normally only calls `write` with the root node(s) and then reads the result with `getvalue`::

        writer = CodeWriter()
        writer.write(scope(line('x'), line('y')))
        print(writer.getvalue())

    A writer is meant to be used for a single rendering and then discarded. It must not be shared between threads.

    Whitespace handling:

    - `indent()` immediately writes an indent unit, as the cursor is assumed to continue on the current line. If
      nothing else is written before the line is broken, that whitespace is dropped again.
    - `dedent()` moves a freshly broken line (i.e. the buffer ends in exactly a newline plus the current indentation)
      back to the outer indentation.
    """

    _options: CodeWriterOptions
    _buffer: str
    _indentation: str
    _pending_indent_start: Optional[int]

    def __init__(self, options: Optional[CodeWriterOptions] = None):
        self._options = options if options is not None else CodeWriterOptions()
        self._buffer = ''
        self._indentation = ''
        self._pending_indent_start = None

    @property
    def options(self) -> CodeWriterOptions:
        return self._options

    @property
    def indentation(self) -> str:
        """The current indentation prefix"""
        return self._indentation

    @property
    def depth(self) -> int:
        """The current nesting depth (number of indent units in the prefix)"""
        return len(self._indentation) // len(self._options.indent_unit)

    @property
    def ast(self) -> Callable[..., NodeList]:
        """
        The text interpolation combinator, `interpolate(fragments, values)`. See the `interpolation` module.
        """
        return interpolate

    @property
    def fmt(self) -> Callable[..., NodeList]:
        """
        The format-string flavor of the interpolation combinator, `interpolate_format(template, *values)`.
        """
        return interpolate_format

    def write(self, *items: Union[str, CodeWriterASTNode]):
        """
        Writes a number of strings and/or nodes, in order. Strings are written verbatim, nodes render themselves.
        """
        for item in items:
            if isinstance(item, str):
                self._append(item)
            elif isinstance(item, CodeWriterASTNode):
                item.write_to(self)
            else:
                raise UnsupportedNodeTypeError(type(item))

    def new_line(self):
        if self._pending_indent_start is not None:
            self._buffer = self._buffer[:self._pending_indent_start]
            self._pending_indent_start = None

        self._buffer += self._options.newline + self._indentation

    def new_line_if_not_last(self):
        if not self._at_fresh_line():
            self.new_line()

    def indent(self):
        unit = self._options.indent_unit

        if self._pending_indent_start is None:
            self._pending_indent_start = len(self._buffer)

        self._indentation += unit
        self._buffer += unit

    def dedent(self):
        unit = self._options.indent_unit

        if len(self._indentation) < len(unit):
            raise RuntimeError("dedent() called without a matching indent()")

        if self._at_fresh_line():
            self._buffer = self._buffer[:-len(unit)]

        self._indentation = self._indentation[:-len(unit)]

        if (self._pending_indent_start is not None) and (self._pending_indent_start >= len(self._buffer)):
            self._pending_indent_start = None

    def getvalue(self) -> str:
        """
        Returns the text written so far.
        """
        return self._buffer

    def __str__(self) -> str:
        return self._buffer

    def _at_fresh_line(self) -> bool:
        return self._buffer.endswith(self._options.newline + self._indentation)

    def _append(self, text: str):
        if text == '':
            return

        self._buffer += text
        self._pending_indent_start = None


def render(*nodes: Union[str, CodeWriterASTNode], options: Optional[CodeWriterOptions] = None) -> str:
    """
    Renders a number of nodes (and/or strings) in a fresh `CodeWriter` and returns the resulting text.
    """
    writer = CodeWriter(options)
    writer.write(*nodes)

    result = writer.getvalue()

    LOG.debug("Rendered %d root node(s) into %d characters", len(nodes), len(result))

    return result
