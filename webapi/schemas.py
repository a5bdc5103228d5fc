# webapi/schemas.py
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from constants import MAX_LOTTERY_TOTAL, MAX_SYSTEMS


class BetslipMetaV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    generated_at: datetime = Field(..., description="marca de tiempo UTC al generar la respuesta")
    source: Literal["runtime"] = "runtime"


class BetslipRequestV1(BaseModel):
    """
    Lotería + selección del jugador.
    odds: tamaño de grupo -> cuota; systems: tamaños de grupo jugados sobre todos los números.
    """

    model_config = ConfigDict(extra="forbid")

    total: int = Field(..., ge=1, le=MAX_LOTTERY_TOTAL, description="números en el bombo")
    selected: int = Field(..., ge=1, le=MAX_LOTTERY_TOTAL, description="números extraídos por sorteo")
    odds: dict[int, float] = Field(..., max_length=MAX_LOTTERY_TOTAL)
    numbers: list[int] = Field(..., max_length=MAX_LOTTERY_TOTAL)
    stake: float
    systems: list[int] = Field(..., max_length=MAX_SYSTEMS)


class WinningCombinationV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    group_size: int
    pool_size: int
    odds: float
    combinations: int


class HitOutcomeV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hit: int
    stake_per_ticket: float
    payout: float
    probability: float
    offered_odds: float
    total_winning_combinations: int
    contributing_combinations: list[WinningCombinationV1]


class BetslipResponseV1(BaseModel):
    """
     Contrato público del endpoint /betslip (v1).
     No debe cambiar sin versionado.
     """
    model_config = ConfigDict(extra="forbid")

    version: Literal["v1"] = "v1"

    total_tickets: int
    stake: float
    stake_per_ticket: float
    outcomes: list[HitOutcomeV1]

    meta: BetslipMetaV1


class ErrorV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    error: str
    detail: str
