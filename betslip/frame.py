from __future__ import annotations

import pandas as pd

from .types import Betslip

FRAME_COLUMNS = ["hit", "stake", "win", "winning_comb_total", "probability_pct", "offered_odds"]


def betslip_to_frame(betslip: Betslip) -> pd.DataFrame:
    """
    Vista tabular del boleto: una fila por acierto alcanzable, en orden
    ascendente. Los valores no se redondean; el formato es cosa del llamador.
    """
    rows = [
        {
            "hit": o.hit,
            "stake": o.stake_per_ticket,
            "win": o.payout,
            "winning_comb_total": o.total_winning_combinations,
            "probability_pct": o.probability * 100,
            "offered_odds": o.offered_odds,
        }
        for o in betslip.outcomes
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return df.astype({"hit": "int64", "winning_comb_total": "int64"})
