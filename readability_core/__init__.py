"""
readability_core

Node scoring and traversal primitives for readability-style main content
detection over BeautifulSoup documents.
- Tree:       handle arena over a parsed document, owns node scores
- Node:       ScoredNode view (structure queries, tag/class/id scoring)
- Traversal:  pre-order "next node" steps, safe under node removal

Public API surface:
  Tree and views  : NodeTree, ScoredNode
  Traversal       : get_next_node, remove_and_get_next, iter_nodes, NodeWalker
  Heuristics      : tag_weight, class_weight
  Configuration   : ScoringConfig, NodeScore, get_default_config
  Error types     : ReadabilityError, TreeError, TraversalError, ConfigError
"""

# --- Tree and node views ---
from .tree import NodeTree
from .node import ScoredNode

# --- Traversal ---
from .traversal import get_next_node, remove_and_get_next, iter_nodes, NodeWalker

# --- Heuristics and configuration ---
from .heuristics import tag_weight, class_weight
from .schemas import ScoringConfig, NodeScore, get_default_config

# --- Exceptions ---
from .exceptions import ReadabilityError, TreeError, TraversalError, ConfigError

__version__ = "0.1.0"
__all__ = [
    "NodeTree",
    "ScoredNode",
    "get_next_node",
    "remove_and_get_next",
    "iter_nodes",
    "NodeWalker",
    "tag_weight",
    "class_weight",
    "ScoringConfig",
    "NodeScore",
    "get_default_config",
    "ReadabilityError",
    "TreeError",
    "TraversalError",
    "ConfigError",
]
