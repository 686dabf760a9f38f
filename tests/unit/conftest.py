"""Fixtures for harness unit tests."""

import pytest

from harness.config import HarnessConfig
from tests.unit.fakes import FakePage, UnitConfig


@pytest.fixture
def unit_config() -> type[HarnessConfig]:
    return UnitConfig


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()
