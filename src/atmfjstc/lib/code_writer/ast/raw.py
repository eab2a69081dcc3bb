from dataclasses import dataclass
from typing import Any, Union

from atmfjstc.lib.code_writer.ast.base import CodeWriterASTNode


@dataclass(frozen=True, repr=False)
class Text(CodeWriterASTNode):
    """
    A node containing literal text that will be written as-is, with no escaping and no indentation processing.

    The text should normally not contain newlines, as these will not be followed by the current indentation. Use
    `Line` nodes to break lines.
    """
    NODE_TYPE = 'Text'

    text: str

    def __post_init__(self):
        if not isinstance(self.text, str):
            raise TypeError(f"Text content must be a str, got {type(self.text).__name__}")

    def write_to(self, writer):
        writer.write(self.text)

    def describe_fields(self):
        return dict(text=self.text)


@dataclass(frozen=True, repr=False)
class ClassReference(CodeWriterASTNode):
    """
    A node containing the name of a type or other symbol referenced by the generated code.

    It renders exactly like a `Text` node. The distinction lets tools walking the tree (e.g. an import collector) find
    all the symbols the code depends on::

        names = {ref.name for ref in tree.iter_subtree(only_type=ClassReference)}
    """
    NODE_TYPE = 'ClassReference'

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"Class reference name must be a str, got {type(self.name).__name__}")

    def write_to(self, writer):
        writer.write(self.name)

    def describe_fields(self):
        return dict(name=self.name)


def text(value: str) -> Text:
    return Text(value)


def class_reference(name: str) -> ClassReference:
    return ClassReference(name)


def as_node(item: Union[str, CodeWriterASTNode, Any]) -> Any:
    """
    Wraps raw strings in `Text` nodes and passes everything else through unchanged (node constructors will reject any
    non-node that gets through).
    """
    return Text(item) if isinstance(item, str) else item
