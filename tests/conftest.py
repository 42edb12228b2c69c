"""Shared test fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

# Make _helpers importable from test files
sys.path.insert(0, str(Path(__file__).parent))

from _helpers import ScriptedRandom  # noqa: E402

from bitgenome import config as config_module  # noqa: E402
from bitgenome.genetics import rng as rng_module  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_defaults(monkeypatch):
    """Isolate each test from process-wide defaults and the environment."""
    monkeypatch.delenv("BITGENOME_MUTATION_PROBABILITY", raising=False)
    monkeypatch.delenv("BITGENOME_ADDITION_PROBABILITY", raising=False)
    monkeypatch.setattr(config_module, "_default_config", None)
    monkeypatch.setattr(rng_module, "_rng", np.random.default_rng(1234))
    yield


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def scripted() -> ScriptedRandom:
    return ScriptedRandom()
