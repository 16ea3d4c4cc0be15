"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_record() -> str:
    """Move section of a game record, one of each move family."""
    return "XU兵XY無撃裁 KE皇[或]KI\n黒弓MY\u3000LY弓ZY水五\n"
