import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

HELLO = bytes([0x48, 0x61, 0x6C, 0x6C, 0x6F])


@pytest.fixture()
def hello():
    """Fresh mutable copy of b'Hello'."""
    return bytearray(HELLO)
