from abc import ABCMeta, abstractmethod
from typing import Any, Dict, Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from atmfjstc.lib.code_writer.CodeWriter import CodeWriter
    from atmfjstc.lib.code_writer.CodeWriterOptions import CodeWriterOptions


class CodeWriterASTNode(metaclass=ABCMeta):
    """
    Base class for all AST nodes used to describe the structure of a generated piece of code.

    Nodes are immutable once created. All the state that changes during rendering (the output buffer, the current
    indentation) lives in the `CodeWriter` that the node is written to.
    """
    NODE_TYPE = None

    @abstractmethod
    def write_to(self, writer: 'CodeWriter'):
        """
        Renders this node (and, recursively, its children) into a code writer.

        Args:
            writer: The `CodeWriter` that receives the text. Its indentation is guaranteed to be the same after the
                call as it was before, even though nodes like `Indent` alter it temporarily.
        """
        raise NotImplementedError

    @abstractmethod
    def describe_fields(self) -> Dict[str, Any]:
        """
        Returns this node's own fields in a form suitable for `describe()`, i.e. with child nodes already described.
        """
        raise NotImplementedError

    def describe(self) -> Dict[str, Any]:
        """
        Returns a structural description of this node, for logging and snapshot testing.

        The description is a dict with a ``node_type`` key (the variant name) followed by the node's fields. Child
        nodes appear as descriptions of their own.
        """
        return dict(node_type=self.NODE_TYPE, **self.describe_fields())

    def iter_children(self) -> Iterable['CodeWriterASTNode']:
        """
        Iterates through this node's children (and them alone), if any exist.
        """
        yield from ()

    def iter_subtree(self, only_type=None, root_first=True, include_root=True) -> Iterable['CodeWriterASTNode']:
        """
        Iterates through this node and all of its children, and all of their children etc.
        """
        if root_first and include_root:
            if only_type is None or isinstance(self, only_type):
                yield self

        for child in self.iter_children():
            yield from child.iter_subtree(only_type=only_type, root_first=root_first)

        if not root_first and include_root:
            if only_type is None or isinstance(self, only_type):
                yield self

    def render(self, options: Optional['CodeWriterOptions'] = None) -> str:
        """
        Convenience method for rendering this node on its own, in a fresh `CodeWriter`.
        """
        from atmfjstc.lib.code_writer.CodeWriter import render

        return render(self, options=options)

    def __repr__(self):
        from atmfjstc.lib.code_writer._describe import describe_node

        return describe_node(self)


def check_child_nodes(owner_type: str, nodes: Iterable[Any]) -> tuple:
    """
    Converts an iterable of children to a tuple, checking that every item is an AST node.
    """
    if isinstance(nodes, (str, CodeWriterASTNode)):
        raise TypeError(f"{owner_type} expects a sequence of child nodes, got a single {type(nodes).__name__}")

    nodes = tuple(nodes)

    for index, node in enumerate(nodes):
        if not isinstance(node, CodeWriterASTNode):
            raise TypeError(f"Child #{index} of {owner_type} must be an AST node, got {type(node).__name__}")

    return nodes
