from __future__ import annotations

from constants import ODDS_DP, PROBABILITY_DP, STAKE_DP, WIN_DP
from .types import Betslip, HitOutcome, LotteryConfig, PlayerChoice

_RULE = "-" * 53


def _fmt_decimal(value: float, dp: int) -> str:
    # hasta dp decimales, sin ceros sobrantes a la derecha
    s = f"{value:.{dp}f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def _fmt_nums(nums) -> str:
    return " ".join(f"{n:02d}" for n in nums)


def _fmt_odds(odds) -> str:
    return ", ".join(f"{g}={_fmt_decimal(o, ODDS_DP)}" for g, o in sorted(odds.items()))


def format_lottery(config: LotteryConfig) -> str:
    return f"🎯 Lotería {config.draw}  |  cuotas {{{_fmt_odds(config.odds_by_group)}}}"


def format_choice(choice: PlayerChoice) -> str:
    systems = ", ".join(f"{b.group_size}={b}" for b in choice.system_bets)
    lines = [
        "Selección del jugador:",
        _RULE,
        f"- números: {_fmt_nums(choice.numbers)}",
        f"- sistemas: {{{systems}}}",
        f"- apuesta: {choice.stake!r}",
        f"- apuestas virtuales: {choice.total_tickets}",
    ]
    return "\n".join(lines)


def format_hit(outcome: HitOutcome) -> str:
    combos = ", ".join(str(c) for c in outcome.contributing_combinations)
    return (
        f"HIT={outcome.hit}"
        f", Stake={_fmt_decimal(outcome.stake_per_ticket, STAKE_DP)}"
        f", WIN={_fmt_decimal(outcome.payout, WIN_DP)}"
        f", Winning Comb. Total={outcome.total_winning_combinations}"
        f", Winning Comb.=[{combos}]"
        f", probability={_fmt_decimal(outcome.probability * 100, PROBABILITY_DP)}%"
        f", offeredOdds={outcome.offered_odds!r}"
    )


def format_betslip(betslip: Betslip) -> str:
    lines = [_RULE, "Aciertos:", _RULE]
    if betslip.outcomes:
        lines.extend(format_hit(o) for o in betslip.outcomes)
    else:
        lines.append("  (ningún acierto alcanzable)")
    return "\n".join(lines)
