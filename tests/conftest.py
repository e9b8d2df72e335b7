import pytest

from growarray.core.allocator import BufferAllocator


@pytest.fixture
def allocator():
    return BufferAllocator()
