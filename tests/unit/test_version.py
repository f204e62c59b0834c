"""Test basic package functionality."""

import domoscio_client


def test_version():
    """Test that package version is defined."""
    assert hasattr(domoscio_client, "__version__")
    assert domoscio_client.__version__ == "0.1.0"


def test_public_names():
    for name in domoscio_client.__all__:
        assert hasattr(domoscio_client, name)
