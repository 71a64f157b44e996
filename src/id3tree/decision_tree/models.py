"""Pydantic models for grown decision trees: leaves, nodes, and the build result."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Public models -- Tree elements
# ---------------------------------------------------------------------------


class Leaf(BaseModel):
    """Terminal tree element carrying a final decision.

    Attributes:
        kind (Literal["leaf"]): Discriminator field; always `"leaf"`.
        path_label (str): How this leaf was reached, e.g. `"Schnee: 1"`.
            Empty when the leaf is the root.
        decision (str): The decision as `"<label attribute>: <label value>"`,
            e.g. `"Rad: 0"`.
        label (str): The chosen label value on its own, e.g. `"0"`.
        sample_count (int): Number of training rows that reached this leaf.
        entropy (float): Entropy of the label distribution of those rows. Zero
            when all rows share a label; may be positive for a majority vote.

    Examples:
        >>> leaf = Leaf(path_label="Schnee: 1", decision="Rad: 0", label="0", sample_count=2, entropy=0.0)
        >>> leaf.kind
        'leaf'
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = Field(default="leaf", description='Discriminator field. Always "leaf".')
    path_label: str = Field(description="How this element was reached; empty at the root.")
    decision: str = Field(description="Decision string '<label attribute>: <label value>'.")
    label: str = Field(description="Chosen label value.")
    sample_count: int = Field(ge=1, description="Number of training rows that reached this leaf.")
    entropy: float = Field(ge=0.0, description="Entropy of the label distribution at this leaf, in bits.")


class Node(BaseModel):
    """Internal tree element that splits its rows on one attribute.

    Attributes:
        kind (Literal["node"]): Discriminator field; always `"node"`.
        path_label (str): How this node was reached; empty at the root.
        attribute (str): Name of the attribute this node splits on.
        sample_count (int): Number of training rows that reached this node.
        entropy (float): Entropy of the label distribution of those rows.
        children (tuple[TreeElement, ...]): One child per distinct value of
            `attribute` among the node's rows, in ascending value order.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["node"] = Field(default="node", description='Discriminator field. Always "node".')
    path_label: str = Field(description="How this element was reached; empty at the root.")
    attribute: str = Field(description="Attribute the node splits on.")
    sample_count: int = Field(ge=1, description="Number of training rows that reached this node.")
    entropy: float = Field(ge=0.0, description="Entropy of the label distribution at this node, in bits.")
    children: tuple[TreeElement, ...] = Field(
        min_length=1,
        description="Child elements, one per observed value of the split attribute, in ascending value order.",
    )

    @model_validator(mode="after")
    def _validate_children_sample_counts(self) -> Node:
        """Validate that the children partition this node's rows.

        Returns:
            Node: The validated model instance.

        Raises:
            ValueError: If the children's sample counts do not sum to `sample_count`.
        """
        child_total = sum(child.sample_count for child in self.children)
        if child_total != self.sample_count:
            raise ValueError(f"children sample counts sum to {child_total}, expected {self.sample_count}")
        return self


# Union of Leaf and Node, discriminated by the `kind` field.
type TreeElement = Annotated[Leaf | Node, Field(discriminator="kind")]

Node.model_rebuild()


# ---------------------------------------------------------------------------
# Public models -- Build result
# ---------------------------------------------------------------------------


class DecisionTreeResult(BaseModel):
    """A grown decision tree together with its summary statistics.

    Attributes:
        label_attribute (str): Name of the label attribute.
        feature_attributes (list[str]): Feature attributes available to the tree.
        root (TreeElement): Root element of the tree.
        sample_count (int): Number of rows the tree was grown from.
        depth (int): Number of nodes on the longest root-to-leaf path; a tree
            consisting of a single leaf has depth 0.
        leaf_count (int): Number of leaves in the tree.
    """

    model_config = ConfigDict(frozen=True)

    label_attribute: str = Field(description="Name of the label attribute.")
    feature_attributes: list[str] = Field(description="Feature attributes available to the tree.")
    root: TreeElement = Field(description="Root element of the tree.")
    sample_count: int = Field(ge=1, description="Number of rows the tree was grown from.")
    depth: int = Field(ge=0, description="Number of nodes on the longest root-to-leaf path.")
    leaf_count: int = Field(ge=1, description="Number of leaves in the tree.")

    @model_validator(mode="after")
    def _validate_root_sample_count(self) -> DecisionTreeResult:
        """Validate that the root saw every row.

        Returns:
            DecisionTreeResult: The validated model instance.

        Raises:
            ValueError: If the root's sample count differs from `sample_count`.
        """
        if self.root.sample_count != self.sample_count:
            raise ValueError(f"root sample_count ({self.root.sample_count}) must equal sample_count ({self.sample_count})")
        return self

    @model_validator(mode="after")
    def _validate_depth_within_feature_count(self) -> DecisionTreeResult:
        """Validate that the tree is no deeper than the number of features.

        Returns:
            DecisionTreeResult: The validated model instance.

        Raises:
            ValueError: If `depth` exceeds `len(feature_attributes)`.
        """
        if self.depth > len(self.feature_attributes):
            raise ValueError(f"depth ({self.depth}) cannot exceed feature count ({len(self.feature_attributes)})")
        return self
