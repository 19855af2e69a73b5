"""Shared fixtures for swapfs tests."""

from __future__ import annotations

import pytest

from swapfs.facade import SwapFS
from tests.fakes import RecordingImpl


@pytest.fixture
def base() -> RecordingImpl:
    return RecordingImpl("base")


@pytest.fixture
def fs(base: RecordingImpl) -> SwapFS:
    return SwapFS(impl=base)
