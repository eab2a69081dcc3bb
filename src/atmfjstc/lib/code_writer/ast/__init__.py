"""
The node types (and the functions for conveniently creating them) used to assemble a code writer AST.
"""

from atmfjstc.lib.code_writer.ast.base import CodeWriterASTNode
from atmfjstc.lib.code_writer.ast.raw import Text, ClassReference, text, class_reference
from atmfjstc.lib.code_writer.ast.structural import (
    NodeSequence, NodeList, Line, Statement, Indent, Scope, NewLineIfNotLast, EmptyNode,
    node_list, line, statement, indent, scope, new_line_if_not_last, empty,
)
from atmfjstc.lib.code_writer.ast.dynamic import Callback, callback
