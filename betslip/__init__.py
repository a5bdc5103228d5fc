"""
Public API for the `betslip` package.

Stable entry points used by the driver (`main.py`) and the web API:

- binomial, BinomialValue, hypergeometric
- LotteryConfig, SystemBet, PlayerChoice
- achievable_hits, resolve_hits, hit_probability, build_betslip
- Betslip, HitOutcome, WinningCombination
- format_lottery, format_choice, format_hit, format_betslip
- betslip_to_frame
- BetslipError, InvalidParameterError, EmptySystemsError, MissingOddsError

`engine` and `combinatorics` internals not listed here may change without
notice.
"""

from __future__ import annotations

# Import only from leaf modules to avoid circular imports.
from .combinatorics import BinomialValue, binomial, hypergeometric
from .engine import achievable_hits, build_betslip, hit_probability, resolve_hits
from .errors import BetslipError, EmptySystemsError, InvalidParameterError, MissingOddsError
from .format import format_betslip, format_choice, format_hit, format_lottery
from .frame import betslip_to_frame
from .types import Betslip, HitOutcome, LotteryConfig, PlayerChoice, SystemBet, WinningCombination

__all__ = [
    # combinatoria
    "binomial",
    "BinomialValue",
    "hypergeometric",
    # modelos
    "LotteryConfig",
    "SystemBet",
    "PlayerChoice",
    "WinningCombination",
    "HitOutcome",
    "Betslip",
    # cálculo
    "achievable_hits",
    "hit_probability",
    "resolve_hits",
    "build_betslip",
    # presentación
    "format_lottery",
    "format_choice",
    "format_hit",
    "format_betslip",
    "betslip_to_frame",
    # errores
    "BetslipError",
    "InvalidParameterError",
    "EmptySystemsError",
    "MissingOddsError",
]
