"""
A small engine for emitting formatted source code from a tree of structural nodes.

Rationale
---------

Generating code by concatenating strings works well enough for a few lines, but soon becomes a mess of manually
tracked indentation, stray blank lines and forgotten line breaks. The problem gets worse as soon as the generated code
is driven by data (e.g. one branch per case of a union type), since the code doing the generation is then full of
loops and conditionals, each of which must get the whitespace exactly right.

With this package, the generating code instead builds a tree of nodes that describe intent: "this is a line", "this is
a statement", "this is a brace-delimited block", "this is a reference to a type". The tree is then written into a
`CodeWriter`, which takes care of the indentation and line breaks in a single pass.


Example
-------

::

    json_object = class_reference('JsonObject')
    writer = CodeWriter()

    writer.write(
        line(writer.fmt('{} json = value.Type switch', json_object)),
        scope(
            *(
                line(writer.fmt('"{}" => ', case.wire_value), case_body(case))
                for case in cases
            ),
            '_ => JsonSerializer.SerializeToNode(value.Value, options)',
        ),
        statement(writer.fmt(' ?? new {}()', json_object)),
    )

    print(writer.getvalue())

Result::

    JsonObject json = value.Type switch
    {
      "type1" => JsonSerializer.SerializeToNode(value.Value, options),
      "type3" => null,
      _ => JsonSerializer.SerializeToNode(value.Value, options)
    } ?? new JsonObject();


Node types
----------

- `Text`: literal text, written as-is
- `ClassReference`: a type or symbol name, written as-is but discoverable via `iter_subtree`
- `Line`: children followed by a line break
- `Statement`: children followed by the terminator (``;``) and a line break
- `Indent`: children written one level deeper
- `Scope`: children in a ``{ }`` block, indented, with no blank line before the ``}``
- `NodeList`: children one after the other
- `Callback`: children computed by a function, **called immediately** when the node is created
- `NewLineIfNotLast`: a line break, unless one was just written
- `EmptyNode`: nothing

Each has a lowercase factory function (`text`, `line`, `scope`, etc.) that also accepts raw strings in place of
`Text` nodes.
"""

from atmfjstc.lib.code_writer.CodeWriterOptions import CodeWriterOptions
from atmfjstc.lib.code_writer.CodeWriter import CodeWriter, render
from atmfjstc.lib.code_writer.ast import (
    CodeWriterASTNode, Text, ClassReference, NodeSequence, NodeList, Line, Statement, Indent, Scope, NewLineIfNotLast,
    EmptyNode, Callback, text, class_reference, node_list, line, statement, indent, scope, new_line_if_not_last, empty,
    callback,
)
from atmfjstc.lib.code_writer.interpolation import interpolate, interpolate_format
from atmfjstc.lib.code_writer.errors import CodeWriterError, UnsupportedNodeTypeError, UnsupportedValueTypeError
from atmfjstc.lib.code_writer._describe import describe_node
