from __future__ import annotations

import pytest

from betslip import LotteryConfig, PlayerChoice
from constants import EXAMPLE_NUMBERS


@pytest.fixture
def lottery():
    return LotteryConfig(49, 6, {1: 7.75, 2: 70.00, 3: 700, 4: 8400, 5: 210000})


@pytest.fixture
def choice():
    return PlayerChoice.with_systems(EXAMPLE_NUMBERS, 1.0, (1, 2, 3))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("LOTOBETSLIP_STAKE", raising=False)
    monkeypatch.delenv("LOTOBETSLIP_LOG_LEVEL", raising=False)
