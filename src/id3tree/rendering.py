"""Render grown trees as an indented text outline or as nested HTML lists.

Both renderers are read-only consumers of the tree and show, for every
element, its path label, its split attribute or decision, its training sample
count, and its entropy rounded to two decimal places.
"""

from __future__ import annotations

import html
from typing import Final

from id3tree.decision_tree.models import Leaf, Node, TreeElement

ENTROPY_DECIMAL_PLACES: Final[int] = 2
_INDENT: Final[str] = "  "


def format_entropy(entropy: float) -> str:
    """Format an entropy value for display.

    Args:
        entropy (float): Entropy in bits.

    Returns:
        str: The value rounded to `ENTROPY_DECIMAL_PLACES` decimals, e.g. `"0.54"`.
    """
    return f"{entropy:.{ENTROPY_DECIMAL_PLACES}f}"


def describe_element(element: TreeElement) -> list[str]:
    """Return the display lines for a single element, without its children.

    Args:
        element (TreeElement): A node or leaf.

    Returns:
        list[str]: The path label (omitted when empty), the split attribute or
            decision, the sample count, and the entropy.

    Examples:
        >>> leaf = Leaf(path_label="Schnee: 1", decision="Rad: 0", label="0", sample_count=2, entropy=0.0)
        >>> describe_element(leaf)
        ['Schnee: 1', 'Decision: Rad: 0', 'Training samples: 2', 'Entropy: 0.00']
    """
    match element:
        case Node(attribute=attribute):
            headline = f"Next decision: {attribute}"
        case Leaf(decision=decision):
            headline = f"Decision: {decision}"
    lines = [element.path_label] if element.path_label else []
    lines.extend([
        headline,
        f"Training samples: {element.sample_count}",
        f"Entropy: {format_entropy(element.entropy)}",
    ])
    return lines


def render_text(root: TreeElement) -> str:
    """Render a tree as an indented outline.

    Each element becomes a block of lines prefixed with `- ` on its first
    line; children are indented two spaces deeper than their parent.

    Args:
        root (TreeElement): Root of the tree to render.

    Returns:
        str: The outline, ending without a trailing newline.
    """
    return "\n".join(_text_lines(root, depth=0))


def render_html(root: TreeElement) -> str:
    """Render a tree as nested HTML lists.

    The root is wrapped in `<ul class="tree">`. Nodes render as
    `<li><span class="node">...</span><ul>children</ul></li>` and leaves as
    `<li><span class="leaf">...</span></li>`, with one `<p>` per display line.
    All text is HTML-escaped.

    Args:
        root (TreeElement): Root of the tree to render.

    Returns:
        str: The HTML fragment.
    """
    return f'<ul class="tree">{_html_item(root)}</ul>'


def _text_lines(element: TreeElement, depth: int) -> list[str]:
    indent = _INDENT * depth
    first, *rest = describe_element(element)
    lines = [f"{indent}- {first}", *(f"{indent}  {line}" for line in rest)]
    if isinstance(element, Node):
        for child in element.children:
            lines.extend(_text_lines(child, depth + 1))
    return lines


def _html_item(element: TreeElement) -> str:
    paragraphs = "".join(f"<p>{html.escape(line)}</p>" for line in describe_element(element))
    match element:
        case Node(children=children):
            child_items = "".join(_html_item(child) for child in children)
            return f'<li><span class="node">{paragraphs}</span><ul>{child_items}</ul></li>'
        case Leaf():
            return f'<li><span class="leaf">{paragraphs}</span></li>'
