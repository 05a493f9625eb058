"""Pytest configuration for the posixlocale test suite.

Hypothesis profiles:
- dev: 500 examples, the default locally
- ci: 50 derandomized examples, selected when CI=true

HYPOTHESIS_PROFILE overrides the detection.

Tests marked @pytest.mark.fuzz are skipped unless run with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import settings

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for the long-running round-trip property."""
    config.addinivalue_line("markers", "fuzz: long-running property tests (pytest -m fuzz)")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
