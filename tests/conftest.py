"""
Pytest configuration file for lazyseq tests.

This file ensures that the project root is in the Python path
so that test files can import the lazyseq package from a checkout.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

import pytest


@pytest.fixture
def pull_counter():
    """Wrap a list in a generator that records how many items were pulled"""
    pulled = []

    def wrap(items):
        for item in items:
            pulled.append(item)
            yield item

    wrap.pulled = pulled
    return wrap
