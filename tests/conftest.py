"""Global pytest configuration for the typeh test suite."""

import builtins

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "classify: tests value classification")
    config.addinivalue_line("markers", "matching: tests type expression matching")
    config.addinivalue_line("markers", "validation: tests enforcing validation")
    config.addinivalue_line("markers", "catalog: tests generated accessors")
    config.addinivalue_line("markers", "predicates: tests bespoke predicates")
    config.addinivalue_line("markers", "cli: tests the command line interface")


@pytest.fixture
def clean_builtins():
    """Snapshot builtins and restore them after the test."""
    saved = dict(vars(builtins))
    yield vars(builtins)
    for name in set(vars(builtins)) - set(saved):
        delattr(builtins, name)
    for name, value in saved.items():
        if vars(builtins).get(name) is not value:
            setattr(builtins, name, value)
