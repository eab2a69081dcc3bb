"""
Private module grouping all the functions for rendering a node description (see `CodeWriterASTNode.describe`) as
human-readable text.
"""

from typing import List


def describe_node(node, indent: str = '  ') -> str:
    """
    Renders the structural description of a node as (possibly multiline) text, e.g.::

        Scope(
          nodes=[
            Line(nodes=[Text(text='x')]),
            Line(nodes=[Text(text='y')])
          ]
        )

    Constructs that fit in 40 columns are kept on a single line.
    """
    return "\n".join(_render_value(node.describe(), indent))


def _render_value(value, indent: str) -> List[str]:
    if isinstance(value, dict) and ('node_type' in value):
        return _render_description(value, indent)
    if isinstance(value, (list, tuple)):
        return _render_block('[', ']', [_render_value(item, indent) for item in value], indent)

    return repr(value).split("\n")


def _render_description(description, indent):
    field_renders = [
        _add_prompt(_render_value(value, indent), name + '=')
        for name, value in description.items()
        if name != 'node_type'
    ]

    return _render_block(description['node_type'] + '(', ')', field_renders, indent)


def _render_block(head, tail, rendered_items, indent):
    oneliner = _try_oneliner(head, tail, rendered_items)
    if oneliner is not None:
        return [oneliner]

    result = [head]

    for item_index, rendered_item in enumerate(rendered_items):
        is_last_item = (item_index == len(rendered_items) - 1)

        for line_index, line in enumerate(rendered_item):
            is_last_line = (line_index == len(rendered_item) - 1)
            result.append(indent + line + (',' if is_last_line and not is_last_item else ''))

    result.append(tail)

    return result


def _try_oneliner(head, tail, rendered_items):
    if any(len(item) > 1 for item in rendered_items):
        return None

    candidate = head + ', '.join(item[0] for item in rendered_items) + tail

    return candidate if ((len(rendered_items) == 0) or len(candidate) <= 40) else None


def _add_prompt(rendered_value, prompt):
    return [prompt + rendered_value[0], *rendered_value[1:]]
