"""Pytest configuration for integration tests."""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as end-to-end through the CLI"
    )
