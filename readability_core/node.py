"""
ScoredNode: a scored view over one node of a NodeTree.

A view is just (tree, handle). It holds no structure of its own; parent,
children and siblings are asked of the tree on every call, and the score is
stored in the tree so that every view of a node sees the same value. Views
are cheap to create and compare equal when they point at the same node.
"""

import re
from typing import TYPE_CHECKING, Optional, Union

from .heuristics import class_weight, tag_weight
from .logger import get_module_logger
from .schemas import NodeScore

if TYPE_CHECKING:
    from bs4.element import PageElement
    from .tree import NodeTree

logger = get_module_logger("node")

# Two or more whitespace characters, collapsed by get_text_content(normalize=True)
WHITESPACE_RUN = re.compile(r'\s{2,}')

Score = Union[int, float]


class ScoredNode:
    """Scored view over a document node."""

    __slots__ = ('tree', 'handle')

    def __init__(self, tree: "NodeTree", handle: int):
        self.tree = tree
        self.handle = handle

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScoredNode):
            return NotImplemented
        return self.tree is other.tree and self.handle == other.handle

    def __hash__(self) -> int:
        return hash((id(self.tree), self.handle))

    def __repr__(self) -> str:
        return f"<ScoredNode {self.tag_name}#{self.handle} score={self.get_content_score()}>"

    def _view(self, handle: Optional[int]) -> Optional["ScoredNode"]:
        return None if handle is None else ScoredNode(self.tree, handle)

    # --- Structure ---

    @property
    def tag_name(self) -> str:
        return self.tree.tag_name(self.handle)

    def tag_name_equals(self, value: str) -> bool:
        """Checks the tag name, case-insensitively."""
        return value.lower() == self.tag_name.lower()

    def is_text(self) -> bool:
        return self.tree.is_text(self.handle)

    def get_attribute(self, name: str) -> str:
        return self.tree.attribute(self.handle, name)

    def has_children(self) -> bool:
        return self.tree.first_child(self.handle) is not None

    def get_children(self) -> list["ScoredNode"]:
        """All child nodes, including text and comment nodes."""
        return [ScoredNode(self.tree, h) for h in self.tree.children(self.handle)]

    def has_single_paragraph_child(self) -> bool:
        """
        True if this node's only child is a <p>.

        A <div> wrapping a single <p> is, in practice, a paragraph; callers
        use this to avoid scoring the wrapper and the paragraph separately.
        Whitespace text between tags counts as a child.
        """
        children = self.tree.children(self.handle)
        if len(children) != 1:
            return False
        return self.tree.tag_name(children[0]).lower() == 'p'

    def get_parent(self) -> Optional["ScoredNode"]:
        """Parent view, or None at the document root."""
        return self._view(self.tree.parent(self.handle))

    def get_next(self) -> Optional["ScoredNode"]:
        return self._view(self.tree.next_sibling(self.handle))

    def get_previous(self) -> Optional["ScoredNode"]:
        return self._view(self.tree.previous_sibling(self.handle))

    def get_ancestors(self, max_levels: int = 3) -> list["ScoredNode"]:
        """
        Get the ancestors of this node, nearest first.

        Args:
            max_levels: Max amount of ancestors to collect; 0 or less means
                walk all the way to the document root.

        Returns:
            List of ancestor views, shorter than max_levels if the root is
            reached first
        """
        ancestors = []
        parent = self.tree.parent(self.handle)
        while parent is not None:
            ancestors.append(ScoredNode(self.tree, parent))
            if 0 < max_levels <= len(ancestors):
                break
            parent = self.tree.parent(parent)
        return ancestors

    def get_all_links(self) -> Optional[list["ScoredNode"]]:
        """All descendant <a> elements in document order; None for a text node."""
        anchors = self.tree.anchors(self.handle)
        if anchors is None:
            return None
        return [ScoredNode(self.tree, h) for h in anchors]

    def get_text_content(self, normalize: bool = False) -> str:
        """
        Returns the full text of the node.

        Args:
            normalize: Collapse whitespace runs to a single space and trim
        """
        text = self.tree.text(self.handle)
        if normalize:
            text = WHITESPACE_RUN.sub(' ', text).strip()
        return text

    def set_node_name(self, value: str) -> None:
        """Rename the underlying tag in place (e.g. div → p)."""
        self.tree.rename(self.handle, value)

    def get_dom_node(self) -> "PageElement":
        """The BeautifulSoup element behind this view."""
        return self.tree.element(self.handle)

    # --- Scoring ---

    def initialize_node(self) -> "ScoredNode":
        """
        Seed the score from the tag name and the class/id weight.

        Returns:
            self, so callers can chain: tree.node(e).initialize_node()
        """
        config = self.tree.config
        score = self.get_content_score() + tag_weight(self.tag_name, config)
        score += self.get_class_weight()
        self.set_content_score(score)
        logger.debug(f"Initialized {self.tag_name}#{self.handle}: {score}")
        return self

    def get_class_weight(self) -> int:
        """Weight of this node's class and id attributes."""
        return class_weight(
            self.get_attribute('class'),
            self.get_attribute('id'),
            self.tree.config
        )

    def get_content_score(self) -> Score:
        return self.tree.score(self.handle)

    def set_content_score(self, score: Score) -> Score:
        """Store the score (negative zero becomes 0) and return the stored value."""
        return self.tree.set_score(self.handle, score)

    @property
    def content_score(self) -> Score:
        return self.get_content_score()

    @content_score.setter
    def content_score(self, score: Score) -> None:
        self.set_content_score(score)

    def snapshot(self) -> NodeScore:
        return NodeScore(
            handle=self.handle,
            tag=self.tag_name,
            class_name=self.get_attribute('class'),
            element_id=self.get_attribute('id'),
            score=self.get_content_score()
        )
