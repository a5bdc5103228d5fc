from __future__ import annotations

import logging
from fractions import Fraction
from typing import Optional

from .combinatorics import BinomialValue, binomial
from .errors import EmptySystemsError
from .types import Betslip, HitOutcome, LotteryConfig, PlayerChoice, WinningCombination


# -----------------------------
# Logging
# -----------------------------

log = logging.getLogger(__name__)


# -----------------------------
# Resolución de aciertos
# -----------------------------

def achievable_hits(config: LotteryConfig, choice: PlayerChoice) -> range:
    """
    Aciertos que pueden producir premio: desde el menor grupo comprado hasta
    min(números elegidos, números extraídos). Puede ser un rango vacío.
    """
    return range(choice.min_group, min(choice.bullets, config.selected) + 1)


def hit_probability(config: LotteryConfig, hit: int, draws: Optional[int] = None) -> Fraction:
    """
    P(h) = C(selected, h) * C(total - selected, selected - h) / C(total, selected)

    Depende sólo del sorteo (total/selected), no de cuántos números haya
    elegido el jugador. `draws` es C(total, selected); si se pasa, no se
    recalcula en cada acierto.
    """
    if draws is None:
        draws = config.draw.value
    if not 0 <= hit <= config.selected:
        return Fraction(0)
    favourable = (binomial(config.selected, hit)
                  * binomial(config.total - config.selected, config.selected - hit))
    return Fraction(favourable, draws)


def resolve_hits(config: LotteryConfig, choice: PlayerChoice) -> dict[int, tuple[WinningCombination, ...]]:
    """
    Para cada acierto alcanzable, las combinaciones ganadoras de cada sistema
    que contribuye (grupo <= acierto), con su cuota efectiva.

    Las claves se insertan en orden ascendente de aciertos.
    Lanza MissingOddsError si un grupo que contribuye no tiene cuota.
    """
    hits = achievable_hits(config, choice)
    log.debug("Aciertos alcanzables %s..%s para %s sistemas",
              hits.start, hits.stop - 1, len(choice.system_bets))

    resolved: dict[int, tuple[WinningCombination, ...]] = {}
    for hit in hits:
        winners = []
        for bet in choice.system_bets:
            if hit < bet.group_size:
                continue
            # tope en el mayor grupo comprado por el jugador, no en el de la tabla
            odds = config.group_odds(min(bet.group_size, choice.max_group))
            combination = BinomialValue.of(bet.group_size, hit)
            log.debug("hit=%s grupo=%s cuota=%s combinaciones=%s",
                      hit, bet.group_size, odds, combination.value)
            winners.append(WinningCombination(system_bet=bet, odds=odds, combinations=combination))
        resolved[hit] = tuple(winners)
    return resolved


# -----------------------------
# Construcción del boleto
# -----------------------------

def build_betslip(config: LotteryConfig, choice: PlayerChoice) -> Betslip:
    """
    Calcula el boleto completo: un HitOutcome por acierto alcanzable, en
    orden ascendente.

    La apuesta se reparte a partes iguales entre todas las apuestas virtuales
    de todos los sistemas; el premio de cada acierto es
    stake_per_ticket * sum(cuota_i * C(h, g_i)).
    """
    if not choice.system_bets:
        raise EmptySystemsError("La selección no contiene ningún sistema")

    stake_per_ticket = choice.stake / choice.total_tickets
    draws = config.draw.value  # C(total, selected), común a todos los aciertos
    resolved = resolve_hits(config, choice)

    outcomes = []
    for hit in sorted(resolved):
        winners = resolved[hit]
        payout = stake_per_ticket * sum(w.weight for w in winners)
        outcomes.append(HitOutcome(
            hit=hit,
            contributing_combinations=winners,
            stake_per_ticket=stake_per_ticket,
            payout=payout,
            probability_exact=hit_probability(config, hit, draws),
        ))

    log.info("Boleto %s/%s: %s números, %s apuestas virtuales, %s aciertos con premio",
             config.selected, config.total, choice.bullets, choice.total_tickets, len(outcomes))
    return Betslip(tuple(outcomes))
