"""Shared fixtures: a fake rendering engine and an adapter around it."""

from __future__ import annotations

import pytest
from components import Counter
from fake_engine import FakeEngine

from inspectree import Adapter


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def adapter(engine):
    return Adapter(engine)


@pytest.fixture(autouse=True)
def _reset_render_counts():
    Counter.renders = 0
    yield
