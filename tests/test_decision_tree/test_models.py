"""Tests for the tree models: Leaf, Node, TreeElement, DecisionTreeResult."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError
from pytest_check import check

from id3tree.decision_tree.models import DecisionTreeResult, Leaf, Node, TreeElement


def _leaf(path_label: str, label: str, sample_count: int) -> Leaf:
    """Build a pure leaf for the Rad label.

    Args:
        path_label (str): Path label of the leaf.
        label (str): Label value.
        sample_count (int): Number of samples at the leaf.

    Returns:
        Leaf: The leaf.
    """
    return Leaf(path_label=path_label, decision=f"Rad: {label}", label=label, sample_count=sample_count, entropy=0.0)


class TestLeaf:
    """Tests for the Leaf model."""

    def test_construction_sets_fields_and_discriminator(self) -> None:
        """A leaf should store every field and report kind 'leaf'."""
        # Act
        leaf = _leaf("Schnee: 1", "0", 2)

        # Assert
        with check:
            assert leaf.kind == "leaf"
        with check:
            assert leaf.path_label == "Schnee: 1"
        with check:
            assert leaf.decision == "Rad: 0"
        with check:
            assert leaf.sample_count == 2

    def test_leaf_is_frozen(self) -> None:
        """Tree elements are never mutated after construction."""
        # Arrange
        leaf = _leaf("", "1", 1)

        # Act / Assert
        with pytest.raises(ValidationError):
            leaf.sample_count = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("field", "value"),
        [("sample_count", 0), ("entropy", -0.1)],
        ids=["zero-samples", "negative-entropy"],
    )
    def test_out_of_range_values_are_rejected(self, field: str, value: float) -> None:
        """Sample counts below 1 and negative entropies are invalid.

        Args:
            field (str): Field to override.
            value (float): Invalid value for that field.
        """
        # Arrange
        fields: dict[str, object] = {
            "path_label": "",
            "decision": "Rad: 1",
            "label": "1",
            "sample_count": 1,
            "entropy": 0.0,
        }
        fields[field] = value

        # Act / Assert
        with pytest.raises(ValidationError):
            Leaf(**fields)  # type: ignore[arg-type]


class TestNode:
    """Tests for the Node model."""

    def test_children_keep_order_and_types(self) -> None:
        """Children of mixed kinds should be stored in the given order."""
        # Arrange
        inner = Node(
            path_label="Schnee: 0",
            attribute="Wind",
            sample_count=3,
            entropy=0.9183,
            children=(_leaf("Wind: 0", "1", 2), _leaf("Wind: 1", "0", 1)),
        )

        # Act
        root = Node(
            path_label="",
            attribute="Schnee",
            sample_count=5,
            entropy=0.97,
            children=(inner, _leaf("Schnee: 1", "0", 2)),
        )

        # Assert
        with check:
            assert root.kind == "node"
        with check:
            assert isinstance(root.children[0], Node)
        with check:
            assert isinstance(root.children[1], Leaf)

    def test_children_must_partition_samples(self) -> None:
        """Children whose sample counts do not add up to the node's should be rejected."""
        # Act / Assert
        with pytest.raises(ValidationError, match="sample counts"):
            Node(
                path_label="",
                attribute="Wind",
                sample_count=4,
                entropy=1.0,
                children=(_leaf("Wind: 0", "1", 1), _leaf("Wind: 1", "0", 1)),
            )

    def test_node_requires_children(self) -> None:
        """A node without children is not a valid internal element."""
        # Act / Assert
        with pytest.raises(ValidationError):
            Node(path_label="", attribute="Wind", sample_count=1, entropy=0.0, children=())


class TestTreeElement:
    """Tests for the TreeElement discriminated union."""

    def test_nested_dict_validates_to_models(self) -> None:
        """A JSON-like dict should be dispatched on the kind field at every level."""
        # Arrange
        adapter: TypeAdapter[TreeElement] = TypeAdapter(TreeElement)
        data = {
            "kind": "node",
            "path_label": "",
            "attribute": "Schnee",
            "sample_count": 3,
            "entropy": 0.9183,
            "children": [
                _leaf("Schnee: 0", "1", 2).model_dump(),
                _leaf("Schnee: 1", "0", 1).model_dump(),
            ],
        }

        # Act
        element = adapter.validate_python(data)

        # Assert
        assert isinstance(element, Node)
        with check:
            assert all(isinstance(child, Leaf) for child in element.children)
        with check:
            assert element.model_dump() == data | {"children": tuple(data["children"])}

    def test_unknown_kind_is_rejected(self) -> None:
        """A dict with an unknown discriminator value should fail validation."""
        # Arrange
        adapter: TypeAdapter[TreeElement] = TypeAdapter(TreeElement)

        # Act / Assert
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "branch", "path_label": ""})


class TestDecisionTreeResult:
    """Tests for DecisionTreeResult validators."""

    def test_valid_result(self) -> None:
        """A consistent result should be accepted."""
        # Act
        result = DecisionTreeResult(
            label_attribute="Rad",
            feature_attributes=["Wind"],
            root=_leaf("", "1", 3),
            sample_count=3,
            depth=0,
            leaf_count=1,
        )

        # Assert
        assert result.root.sample_count == 3

    def test_root_sample_count_mismatch_rejected(self) -> None:
        """The root must have seen every row."""
        # Act / Assert
        with pytest.raises(ValidationError, match="root sample_count"):
            DecisionTreeResult(
                label_attribute="Rad",
                feature_attributes=["Wind"],
                root=_leaf("", "1", 2),
                sample_count=3,
                depth=0,
                leaf_count=1,
            )

    def test_depth_beyond_feature_count_rejected(self) -> None:
        """A tree cannot split more often on one path than there are features."""
        # Act / Assert
        with pytest.raises(ValidationError, match="cannot exceed feature count"):
            DecisionTreeResult(
                label_attribute="Rad",
                feature_attributes=[],
                root=_leaf("", "1", 3),
                sample_count=3,
                depth=1,
                leaf_count=1,
            )
