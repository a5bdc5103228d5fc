from __future__ import annotations

import os
from typing import Optional

from constants import (ENV_STAKE, EXAMPLE_NUMBERS, EXAMPLE_STAKE, EXAMPLE_SYSTEMS,
                       LOTTERY_6_49_ODDS, LOTTERY_6_49_SELECTED, LOTTERY_6_49_TOTAL)
from .types import LotteryConfig, PlayerChoice


def example_stake() -> float:
    if ENV_STAKE in os.environ:
        return float(os.environ[ENV_STAKE])
    return EXAMPLE_STAKE


def lottery_6_49() -> LotteryConfig:
    return LotteryConfig.from_odds_list(LOTTERY_6_49_TOTAL, LOTTERY_6_49_SELECTED, LOTTERY_6_49_ODDS)


def example_choice(stake: Optional[float] = None) -> PlayerChoice:
    """15 números jugados en sistemas de 1, 2 y 3 (575 apuestas virtuales)."""
    if stake is None:
        stake = example_stake()
    return PlayerChoice.with_systems(EXAMPLE_NUMBERS, stake, EXAMPLE_SYSTEMS)
