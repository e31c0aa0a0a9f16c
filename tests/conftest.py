import pytest

from salted_bloom import BloomFilter


@pytest.fixture
def small_filter():
    """100-key filter at 1% with reproducible salts."""
    return BloomFilter(capacity=100, error_rate=0.01, rng=1234)
