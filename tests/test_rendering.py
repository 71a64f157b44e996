"""Tests for text and HTML rendering of decision trees."""

from __future__ import annotations

import pytest
from pytest_check import check

from id3tree.decision_tree.models import Leaf, Node
from id3tree.rendering import describe_element, format_entropy, render_html, render_text
from id3tree.session import build_tree_from_text

WEATHER_TEXT = "Wind,Regen,Schnee,Rad\n0,1,0,1\n1,0,0,1\n1,0,1,0\n0,0,0,1\n0,0,1,0\n1,1,0,0\n"

WEATHER_OUTLINE = """\
- Next decision: Schnee
  Training samples: 6
  Entropy: 1.00
  - Schnee: 0
    Next decision: Wind
    Training samples: 4
    Entropy: 0.81
    - Wind: 0
      Decision: Rad: 1
      Training samples: 2
      Entropy: 0.00
    - Wind: 1
      Next decision: Regen
      Training samples: 2
      Entropy: 1.00
      - Regen: 0
        Decision: Rad: 1
        Training samples: 1
        Entropy: 0.00
      - Regen: 1
        Decision: Rad: 0
        Training samples: 1
        Entropy: 0.00
  - Schnee: 1
    Decision: Rad: 0
    Training samples: 2
    Entropy: 0.00"""


@pytest.fixture
def small_tree() -> Node:
    """A one-split tree with a label that needs HTML escaping.

    Returns:
        Node: Root splitting on Outlook with two leaves.
    """
    return Node(
        path_label="",
        attribute="Outlook",
        sample_count=3,
        entropy=0.9183,
        children=(
            Leaf(path_label="Outlook: rain", decision="Play: <no>", label="<no>", sample_count=1, entropy=0.0),
            Leaf(path_label="Outlook: sun", decision="Play: yes & go", label="yes & go", sample_count=2, entropy=0.0),
        ),
    )


class TestFormatEntropy:
    """Tests for format_entropy."""

    @pytest.mark.parametrize(
        ("entropy", "expected"),
        [(0.0, "0.00"), (0.5409, "0.54"), (1.0, "1.00"), (0.918295, "0.92"), (3.0, "3.00")],
    )
    def test_two_decimal_places(self, entropy: float, expected: str) -> None:
        """Entropy should always show exactly two decimals.

        Args:
            entropy (float): Value to format.
            expected (str): Expected display string.
        """
        # Act / Assert
        assert format_entropy(entropy) == expected


class TestDescribeElement:
    """Tests for describe_element."""

    def test_root_node_omits_empty_path_label(self, small_tree: Node) -> None:
        """The root has no path label, so its first line should be the split attribute.

        Args:
            small_tree (Node): Tree fixture.
        """
        # Act / Assert
        assert describe_element(small_tree) == [
            "Next decision: Outlook",
            "Training samples: 3",
            "Entropy: 0.92",
        ]

    def test_leaf_lines(self, small_tree: Node) -> None:
        """A leaf should show its path label followed by its decision.

        Args:
            small_tree (Node): Tree fixture.
        """
        # Act
        lines = describe_element(small_tree.children[1])

        # Assert
        assert lines == ["Outlook: sun", "Decision: Play: yes & go", "Training samples: 2", "Entropy: 0.00"]


class TestRenderText:
    """Tests for render_text."""

    def test_weather_tree_outline(self) -> None:
        """The weather tree should render as the expected indented outline."""
        # Arrange
        root = build_tree_from_text(WEATHER_TEXT)

        # Act
        outline = render_text(root)

        # Assert
        assert outline == WEATHER_OUTLINE

    def test_single_leaf_renders_one_block(self) -> None:
        """A tree that is just a leaf should render four lines without indentation."""
        # Arrange
        root = Leaf(path_label="", decision="Play: yes", label="yes", sample_count=3, entropy=0.0)

        # Act
        outline = render_text(root)

        # Assert
        assert outline.splitlines() == ["- Decision: Play: yes", "  Training samples: 3", "  Entropy: 0.00"]

    def test_children_follow_node_order(self, small_tree: Node) -> None:
        """Children should appear in the order stored on the node.

        Args:
            small_tree (Node): Tree fixture.
        """
        # Act
        outline = render_text(small_tree)

        # Assert
        assert outline.index("Outlook: rain") < outline.index("Outlook: sun")


class TestRenderHtml:
    """Tests for render_html."""

    def test_structure_nests_lists(self, small_tree: Node) -> None:
        """Nodes should wrap their children in a nested list inside the tree list.

        Args:
            small_tree (Node): Tree fixture.
        """
        # Act
        markup = render_html(small_tree)

        # Assert
        with check:
            assert markup.startswith('<ul class="tree"><li><span class="node"><p>Next decision: Outlook</p>')
        with check:
            assert markup.endswith("</li></ul></li></ul>")
        with check:
            assert markup.count('<span class="leaf">') == 2
        with check:
            assert markup.count('<span class="node">') == 1
        with check:
            assert markup.count("<ul") == markup.count("</ul>") == 2

    def test_text_is_escaped(self, small_tree: Node) -> None:
        """Labels containing markup characters should be escaped.

        Args:
            small_tree (Node): Tree fixture.
        """
        # Act
        markup = render_html(small_tree)

        # Assert
        with check:
            assert "<p>Decision: Play: &lt;no&gt;</p>" in markup
        with check:
            assert "<p>Decision: Play: yes &amp; go</p>" in markup
        with check:
            assert "<no>" not in markup

    def test_leaf_root_has_no_nested_list(self) -> None:
        """A leaf root should render as a single list item without children."""
        # Arrange
        root = Leaf(path_label="", decision="Play: yes", label="yes", sample_count=1, entropy=0.0)

        # Act
        markup = render_html(root)

        # Assert
        assert markup == (
            '<ul class="tree"><li><span class="leaf">'
            "<p>Decision: Play: yes</p><p>Training samples: 1</p><p>Entropy: 0.00</p>"
            "</span></li></ul>"
        )

    def test_weather_tree_has_one_item_per_element(self) -> None:
        """Every element of the weather tree should produce one list item."""
        # Arrange
        root = build_tree_from_text(WEATHER_TEXT)

        # Act
        markup = render_html(root)

        # Assert - 3 nodes and 4 leaves
        with check:
            assert markup.count("<li>") == 7
        with check:
            assert markup.count('<span class="leaf">') == 4
