"""
Custom exceptions for readability_core.

Error philosophy:
  - Absent results (no parent, end of traversal, links of a text node) are
    returned as None, never raised.
  - TreeError     → contract violation: a node that is not part of the tree,
                    or markup the tree builder could not handle.
  - TraversalError → a structural mutation that cannot be performed, such as
                    detaching a node that has no parent.
  - ConfigError   → invalid scoring configuration, raised at load time.

Nothing here is retried; every error propagates to the scoring pass.
"""

from typing import Optional


class ReadabilityError(Exception):
    """Base exception for all readability_core errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_response(self) -> dict:
        """Convert to a plain dict for logging or error reports."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details
        }


class TreeError(ReadabilityError):
    """
    Raised when a node handle or element is not part of the tree being
    queried, or when a tree cannot be built from markup.
    """
    pass


class TraversalError(TreeError):
    """Raised when a traversal step cannot mutate the tree as requested."""

    def __init__(
        self,
        message: str,
        handle: Optional[int] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        # Handle of the node the failing step was called with
        self.handle = handle


class ConfigError(ReadabilityError):
    """Raised when the scoring configuration is invalid."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.field = field
