from typing import Type


class CodeWriterError(Exception):
    """
    Base class for all exceptions thrown while rendering a code writer AST or assembling one via interpolation.
    """


class UnsupportedNodeTypeError(CodeWriterError, TypeError):
    value_type: Type

    def __init__(self, value_type: Type):
        super().__init__(f"Unsupported node type: {value_type.__name__}")

        self.value_type = value_type


class UnsupportedValueTypeError(CodeWriterError, TypeError):
    value_type: Type

    def __init__(self, value_type: Type):
        super().__init__(f"Unsupported value type: {value_type.__name__}")

        self.value_type = value_type
