# webapi/app.py
from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from betslip import (Betslip, BetslipError, LotteryConfig, PlayerChoice, build_betslip,
                     format_betslip, format_choice, format_lottery)
from betslip.example import example_choice, lottery_6_49
from webapi.schemas import (BetslipMetaV1, BetslipRequestV1, BetslipResponseV1, ErrorV1,
                            HitOutcomeV1, WinningCombinationV1)

log = logging.getLogger(__name__)

app = FastAPI(title="lotobetslip-webapi", version="1.0.0")


@app.exception_handler(BetslipError)
async def betslip_error_handler(request: Request, exc: BetslipError) -> JSONResponse:
    log.warning("Petición rechazada en %s: %s", request.url.path, exc)
    body = ErrorV1(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


def _betslip_to_v1(choice: PlayerChoice, betslip: Betslip) -> BetslipResponseV1:
    outcomes = [
        HitOutcomeV1(
            hit=o.hit,
            stake_per_ticket=o.stake_per_ticket,
            payout=o.payout,
            probability=o.probability,
            offered_odds=o.offered_odds,
            total_winning_combinations=o.total_winning_combinations,
            contributing_combinations=[
                WinningCombinationV1(
                    group_size=c.system_bet.group_size,
                    pool_size=c.system_bet.pool_size,
                    odds=c.odds,
                    combinations=c.combinations.value,
                )
                for c in o.contributing_combinations
            ],
        )
        for o in betslip.outcomes
    ]

    return BetslipResponseV1(
        total_tickets=choice.total_tickets,
        stake=choice.stake,
        stake_per_ticket=choice.stake_per_ticket,
        outcomes=outcomes,
        meta=BetslipMetaV1(generated_at=datetime.now(timezone.utc)),
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/betslip", response_model=BetslipResponseV1, responses={422: {"model": ErrorV1}})
def post_betslip(req: BetslipRequestV1) -> BetslipResponseV1:
    config = LotteryConfig(req.total, req.selected, req.odds)
    choice = PlayerChoice.with_systems(req.numbers, req.stake, req.systems)
    return _betslip_to_v1(choice, build_betslip(config, choice))


@app.get("/betslip/example", response_model=BetslipResponseV1)
def betslip_example() -> BetslipResponseV1:
    choice = example_choice()
    return _betslip_to_v1(choice, build_betslip(lottery_6_49(), choice))


@app.get("/betslip/example.txt")
def betslip_example_txt():
    config = lottery_6_49()
    choice = example_choice()
    txt = "\n\n".join([format_lottery(config), format_choice(choice),
                       format_betslip(build_betslip(config, choice))])
    return PlainTextResponse(content=txt, media_type="text/plain; charset=utf-8")
