"""Shared pytest configuration."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large walks, skipped by run_tests.py")
