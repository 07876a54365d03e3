"""CLI fixtures: isolate configuration from the developer's environment."""

import pytest

ENV_VARS = [
    "SYMSEARCH_CORPUS",
    "SYMSEARCH_LIMIT",
    "SYMSEARCH_OUTPUT",
    "SYMSEARCH_PACKAGE",
    "SYMSEARCH_VERBOSE",
]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Ignore config files and SYMSEARCH_* variables outside the test."""
    monkeypatch.setattr("symsearch.cli.config.CONFIG_LOCATIONS", [])
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
