"""Shared fixtures: small documents parsed with html5lib."""

import pytest

from readability_core import NodeTree, ScoringConfig


@pytest.fixture
def config():
    # Explicit config so READABILITY_* variables on the test machine don't leak in
    return ScoringConfig()


@pytest.fixture
def make_tree(config):
    def _make(html: str, **kwargs) -> NodeTree:
        return NodeTree.from_html(html, config=kwargs.pop('config', config), **kwargs)
    return _make
