"""
The text interpolation combinator, for mixing literal code with symbol names and subtrees without having to spell out
all the `Text` and `NodeList` nodes.

Two front ends are provided:

- `interpolate(fragments, values)`, which takes the literal fragments and the interpolated values as separate sequences
  (just like a tagged template would receive them)
- `interpolate_format(template, *values)`, which takes a `str.format`-style template, e.g.::

      interpolate_format('{} json = value.{} switch', class_reference('JsonObject'), 'Type')
"""

from string import Formatter
from typing import Any, Sequence, Union

from atmfjstc.lib.code_writer.ast.base import CodeWriterASTNode
from atmfjstc.lib.code_writer.ast.raw import Text
from atmfjstc.lib.code_writer.ast.structural import NodeList
from atmfjstc.lib.code_writer.errors import UnsupportedValueTypeError


InterpolatedValue = Union[str, CodeWriterASTNode]


def interpolate(fragments: Sequence[str], values: Sequence[InterpolatedValue] = ()) -> NodeList:
    """
    Builds a `NodeList` from alternating literal fragments and interpolated values.

    Args:
        fragments: The literal text fragments. The first one goes before the first value, the second between the
            first and second value, and so on. There should normally be one more fragment than there are values. If
            there are more than that, the extra fragments are simply concatenated at the end.
        values: The interpolated values. Nodes are included as-is, strings are wrapped in `Text` nodes.

    Returns:
        A `NodeList` with the fragments (as `Text` nodes) and values in their original order.

    Raises:
        UnsupportedValueTypeError: If a value is neither a node nor a string
        ValueError: If there are no fragments, or more values than there are places for them
    """
    fragments = list(fragments)
    values = list(values)

    if len(fragments) == 0:
        raise ValueError("At least one literal fragment is required")
    if len(values) > len(fragments) - 1:
        raise ValueError(f"Too many values for interpolation ({len(values)} vs a max of {len(fragments) - 1})")

    nodes = [Text(fragments[0])]

    for index, fragment in enumerate(fragments[1:]):
        if index < len(values):
            nodes.append(_value_to_node(values[index]))

        nodes.append(Text(fragment))

    return NodeList(tuple(nodes))


def interpolate_format(template: str, *values: InterpolatedValue) -> NodeList:
    """
    Builds a `NodeList` from a `str.format`-style template and a number of values.

    Placeholders can be either ``{}`` (takes the next value) or ``{N}`` (takes the N-th value). Use ``{{`` and ``}}``
    for literal braces, which is essential when generating code in curly-brace languages. Named placeholders,
    conversions (``!r``) and format specs (``:>10``) are not supported, since values are not necessarily strings.
    """
    fragments = ['']
    placed_values = []
    auto_index = 0
    numbering = None

    for literal, field_name, format_spec, conversion in Formatter().parse(template):
        fragments[-1] += literal

        if field_name is None:
            continue

        if (conversion is not None) or (format_spec != ''):
            raise ValueError(f"Conversions and format specs are not supported in template {template!r}")

        if field_name == '':
            if numbering == 'manual':
                raise ValueError("cannot switch from manual field specification to automatic field numbering")
            numbering = 'auto'
            index = auto_index
            auto_index += 1
        elif field_name.isdigit():
            if numbering == 'auto':
                raise ValueError("cannot switch from automatic field numbering to manual field specification")
            numbering = 'manual'
            index = int(field_name)
        else:
            raise ValueError(f"Named placeholder '{{{field_name}}}' is not supported in template {template!r}")

        if index >= len(values):
            raise ValueError(f"No value provided for placeholder #{index} in template {template!r}")

        placed_values.append(values[index])
        fragments.append('')

    return interpolate(fragments, placed_values)


def _value_to_node(value: Any) -> CodeWriterASTNode:
    if isinstance(value, CodeWriterASTNode):
        return value
    if isinstance(value, str):
        return Text(value)

    raise UnsupportedValueTypeError(type(value))
