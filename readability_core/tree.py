"""
Arena-backed node tree over a BeautifulSoup document.

Every element of the document (tags, text, comments, the document itself)
gets a stable integer handle the first time it is looked at. Structure is
never copied: parent/children/sibling queries go straight to the parsed
document, so removals made through detach() are seen immediately by every
ScoredNode view. Scores live here, keyed by handle, which makes two views of
the same node share one score.

Parsing is delegated to BeautifulSoup (html5lib tree builder by default,
lxml or html.parser on request).
"""

from typing import Optional, Union

from bs4 import BeautifulSoup, Comment, FeatureNotFound, Tag
from bs4.element import Doctype, PageElement

from .exceptions import TreeError, TraversalError
from .logger import get_module_logger
from .node import ScoredNode
from .schemas import ScoringConfig, get_default_config

logger = get_module_logger("tree")

Score = Union[int, float]


class NodeTree:
    """
    Handle arena over one parsed document.

    Handles are plain ints; handle 0 is always the document itself.
    """

    def __init__(self, soup: BeautifulSoup, config: Optional[ScoringConfig] = None):
        self.soup = soup
        self.config = config or get_default_config()
        self._elements: list[PageElement] = []   # handle -> element
        self._handles: dict[int, int] = {}       # id(element) -> handle
        self._scores: dict[int, Score] = {}      # handle -> score, absent means 0
        self.root = self._handle(soup)

    @classmethod
    def from_html(
        cls,
        html: Union[str, bytes],
        parser: Optional[str] = None,
        config: Optional[ScoringConfig] = None
    ) -> "NodeTree":
        """
        Parse markup with BeautifulSoup and wrap the result.

        Args:
            html: HTML string or bytes
            parser: Tree builder name (default: config.parser)
            config: Scoring config shared by all nodes of the tree

        Raises:
            TreeError: if the requested tree builder is not installed
        """
        config = config or get_default_config()
        parser = parser or config.parser
        try:
            soup = BeautifulSoup(html, parser)
        except FeatureNotFound as e:
            raise TreeError(
                f"Tree builder '{parser}' is not available",
                details={"parser": parser, "error": str(e)}
            )
        logger.info(f"Parsed {len(html)} chars of markup with {parser}")
        return cls(soup, config=config)

    # --- Handles ---

    def _handle(self, element: PageElement) -> int:
        """Handle for an element already known to be part of this document."""
        key = id(element)
        handle = self._handles.get(key)
        if handle is None:
            handle = len(self._elements)
            # Keeping the element referenced pins its id() for the tree's lifetime
            self._elements.append(element)
            self._handles[key] = handle
        return handle

    def _maybe_handle(self, element: Optional[PageElement]) -> Optional[int]:
        return None if element is None else self._handle(element)

    def handle_for(self, element: PageElement) -> int:
        """
        Handle for an element supplied by a caller.

        Raises:
            TreeError: if the element does not belong to this document
        """
        if id(element) in self._handles:
            return self._handles[id(element)]

        # Iterative walk to the top; documents can nest arbitrarily deep
        top = element
        while top.parent is not None:
            top = top.parent
        if top is not self.soup:
            raise TreeError(
                "Element is not part of this document",
                details={"element": getattr(element, 'name', None)}
            )
        return self._handle(element)

    def element(self, handle: int) -> PageElement:
        """Underlying BeautifulSoup element for a handle."""
        if not isinstance(handle, int) or not 0 <= handle < len(self._elements):
            raise TreeError(f"Unknown node handle: {handle!r}")
        return self._elements[handle]

    def node(self, target: Union[int, PageElement]) -> ScoredNode:
        """ScoredNode view for a handle or a BeautifulSoup element."""
        if isinstance(target, int):
            self.element(target)
            return ScoredNode(self, target)
        return ScoredNode(self, self.handle_for(target))

    def root_node(self) -> ScoredNode:
        return ScoredNode(self, self.root)

    def find(self, *args, **kwargs) -> Optional[ScoredNode]:
        """soup.find() returning a ScoredNode (or None)."""
        found = self.soup.find(*args, **kwargs)
        return None if found is None else ScoredNode(self, self._handle(found))

    def find_all(self, *args, **kwargs) -> list[ScoredNode]:
        """soup.find_all() returning ScoredNode views in document order."""
        return [ScoredNode(self, self._handle(e)) for e in self.soup.find_all(*args, **kwargs)]

    # --- Node capabilities ---

    def tag_name(self, handle: int) -> str:
        """Tag name, or a '#'-prefixed node kind for non-element nodes."""
        element = self.element(handle)
        if element is self.soup:
            return '#document'
        if isinstance(element, Tag):
            return element.name
        if isinstance(element, Comment):
            return '#comment'
        if isinstance(element, Doctype):
            return '#doctype'
        return '#text'

    def is_text(self, handle: int) -> bool:
        """True for any non-element node (text, comment, doctype)."""
        return not isinstance(self.element(handle), Tag)

    def attribute(self, handle: int, name: str) -> str:
        """Attribute value, "" when absent. Multi-valued attributes are space-joined."""
        element = self.element(handle)
        if not isinstance(element, Tag):
            return ""
        value = element.get(name)
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            return ' '.join(value)
        return value

    def children(self, handle: int) -> list[int]:
        element = self.element(handle)
        if not isinstance(element, Tag):
            return []
        return [self._handle(child) for child in element.contents]

    def first_child(self, handle: int) -> Optional[int]:
        element = self.element(handle)
        if not isinstance(element, Tag) or not element.contents:
            return None
        return self._handle(element.contents[0])

    def parent(self, handle: int) -> Optional[int]:
        return self._maybe_handle(self.element(handle).parent)

    def next_sibling(self, handle: int) -> Optional[int]:
        return self._maybe_handle(self.element(handle).next_sibling)

    def previous_sibling(self, handle: int) -> Optional[int]:
        return self._maybe_handle(self.element(handle).previous_sibling)

    def text(self, handle: int) -> str:
        """Raw text value: all descendant text for elements, the string itself otherwise."""
        element = self.element(handle)
        if isinstance(element, Tag):
            return element.get_text()
        return str(element)

    def anchors(self, handle: int) -> Optional[list[int]]:
        """Descendant <a> elements in document order; None for non-element nodes."""
        element = self.element(handle)
        if not isinstance(element, Tag):
            return None
        return [self._handle(link) for link in element.find_all('a')]

    def rename(self, handle: int, value: str) -> None:
        element = self.element(handle)
        if not isinstance(element, Tag) or element is self.soup:
            raise TreeError(
                f"Cannot rename a {self.tag_name(handle)} node",
                details={"handle": handle, "name": value}
            )
        element.name = value

    def detach(self, handle: int) -> None:
        """
        Remove a node (and its subtree) from its parent.

        Scores of the removed subtree are released; views of it read 0
        afterwards.

        Raises:
            TraversalError: if the node has no parent
        """
        element = self.element(handle)
        if element.parent is None:
            raise TraversalError(
                f"Cannot detach {self.tag_name(handle)} node without a parent",
                handle=handle
            )
        element.extract()

        self._scores.pop(handle, None)
        if isinstance(element, Tag):
            for desc in element.descendants:
                desc_handle = self._handles.get(id(desc))
                if desc_handle is not None:
                    self._scores.pop(desc_handle, None)
        logger.debug(f"Detached {self.tag_name(handle)} node {handle}")

    # --- Scores ---

    def score(self, handle: int) -> Score:
        self.element(handle)
        return self._scores.get(handle, 0)

    def set_score(self, handle: int, value: Score) -> Score:
        """Store a score; anything numerically zero (including -0.0) is stored as 0."""
        self.element(handle)
        if value == 0:
            value = 0
        self._scores[handle] = value
        return value
