from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CodeWriterOptions:
    """
    Holds options that control how a code writer AST is rendered to text.

    For safety, objects of this type are immutable. To "modify" a set of options, you can create an altered copy by
    calling its `derive` function, similar to how one would call `replace` for a named tuple.

    Attributes:
        indent_unit: The text added to the indentation prefix for each nesting level. Must be non-empty and consist
            only of spaces and/or tabs.
        newline: The text used for line breaks
        terminator: The text written at the end of every `Statement` node
    """

    indent_unit: str = '  '
    newline: str = '\n'
    terminator: str = ';'

    def __post_init__(self):
        if not isinstance(self.indent_unit, str):
            raise TypeError(f"Indent unit must be a str, got {type(self.indent_unit).__name__}")
        if (self.indent_unit == '') or (self.indent_unit.strip(' \t') != ''):
            raise ValueError(f"Indent unit must be a non-empty string of spaces and tabs, got {self.indent_unit!r}")
        if self.newline not in ('\n', '\r\n'):
            raise ValueError(f"Newline must be '\\n' or '\\r\\n', got {self.newline!r}")

    def derive(
        self, indent_unit: Optional[str] = None, newline: Optional[str] = None, terminator: Optional[str] = None
    ) -> 'CodeWriterOptions':
        """
        Creates a modified copy of these options (options are otherwise immutable).

        Args:
            indent_unit: The new indent unit (or None to leave it unchanged)
            newline: The new line break text (or None to leave it unchanged)
            terminator: The new statement terminator (or None to leave it unchanged)

        Returns:
            An options object with the modifications performed.
        """
        def coalesce(a, b):
            return a if b is None else b

        return CodeWriterOptions(
            indent_unit=coalesce(self.indent_unit, indent_unit),
            newline=coalesce(self.newline, newline),
            terminator=coalesce(self.terminator, terminator),
        )
