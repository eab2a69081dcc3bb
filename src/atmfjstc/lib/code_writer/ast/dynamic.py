from dataclasses import dataclass
from collections.abc import Iterable
from typing import Any, Callable, Sequence, Union

from atmfjstc.lib.code_writer.ast.base import CodeWriterASTNode
from atmfjstc.lib.code_writer.errors import UnsupportedNodeTypeError


NodeProducer = Callable[[], Union[CodeWriterASTNode, Sequence[CodeWriterASTNode]]]


@dataclass(frozen=True, repr=False, init=False)
class Callback(CodeWriterASTNode):
    """
    A node whose content is computed by a function, allowing branches and loops to appear inline in a template.

    Example::

        scope(
            callback(lambda: [line(field.name) for field in fields] if fields else empty()),
        )

    Notes:

    - The producer is called exactly once, **when the node is created**, not when it is rendered. Any side effects it
      has happen in tree construction order.
    - The producer may return a single node or an iterable of nodes (a generator is fine, it is consumed immediately).
    - The result is not checked until rendering. If it (or any element of it) turns out not to be a node, rendering
      fails with `UnsupportedNodeTypeError` before anything is written for this node.
    """
    NODE_TYPE = 'Callback'

    nodes: Any

    def __init__(self, producer: NodeProducer):
        result = producer()

        if isinstance(result, Iterable) and not isinstance(result, (str, bytes, CodeWriterASTNode)):
            result = tuple(result)

        object.__setattr__(self, 'nodes', result)

    def _resolved_items(self):
        return self.nodes if isinstance(self.nodes, tuple) else (self.nodes,)

    def write_to(self, writer):
        items = self._resolved_items()

        for item in items:
            if not isinstance(item, CodeWriterASTNode):
                raise UnsupportedNodeTypeError(type(item))

        for item in items:
            item.write_to(writer)

    def iter_children(self):
        for item in self._resolved_items():
            if isinstance(item, CodeWriterASTNode):
                yield item

    def describe_fields(self):
        def _describe(item):
            return item.describe() if isinstance(item, CodeWriterASTNode) else item

        if isinstance(self.nodes, tuple):
            return dict(nodes=[_describe(item) for item in self.nodes])

        return dict(nodes=_describe(self.nodes))


def callback(producer: NodeProducer) -> Callback:
    return Callback(producer)
