"""Pytest configuration and shared fixtures."""
from __future__ import annotations


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
