import pytest

import calarith.api as api
from calarith.bootstrap import build_registry


@pytest.fixture
def fresh_registry(monkeypatch):
    """A private registry so tests that register calendars leave the global one alone."""
    reg = build_registry()
    monkeypatch.setattr(api, "_registry", reg)
    return reg
