from __future__ import annotations

import math
from dataclasses import dataclass, field
from fractions import Fraction
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

from .combinatorics import BinomialValue, binomial
from .errors import EmptySystemsError, InvalidParameterError, MissingOddsError


# -----------------------------
# Configuración de la lotería
# -----------------------------

@dataclass(frozen=True)
class LotteryConfig:
    total: int      # números en el bombo
    selected: int   # números extraídos en cada sorteo
    odds_by_group: Mapping[int, float]  # tamaño de grupo -> cuota por unidad apostada

    def __post_init__(self):
        if self.selected < 1 or self.total < 1:
            raise InvalidParameterError(
                f"Lotería inválida: total={self.total}, extraídos={self.selected}"
            )
        if self.selected > self.total:
            raise InvalidParameterError(
                f"No se pueden extraer {self.selected} números de {self.total}"
            )
        if not self.odds_by_group:
            raise InvalidParameterError("La tabla de cuotas está vacía")

        odds = {}
        for group, value in sorted(self.odds_by_group.items()):
            if int(group) != group or group < 1:
                raise InvalidParameterError(f"Grupo de cuota inválido: {group!r}")
            if not (math.isfinite(value) and value > 0):
                raise InvalidParameterError(f"Cuota inválida (no positiva o no finita) para el grupo {group}: {value}")
            odds[int(group)] = float(value)
        # copia de solo lectura: el llamador no puede mutar la tabla después
        object.__setattr__(self, "odds_by_group", MappingProxyType(odds))

    @classmethod
    def from_odds_list(cls, total: int, selected: int, odds: Sequence[float]) -> "LotteryConfig":
        """Tabla de cuotas posicional: odds[i] es la cuota del grupo i + 1."""
        return cls(total, selected, {i: o for i, o in enumerate(odds, 1)})

    @property
    def draw(self) -> BinomialValue:
        return BinomialValue.of(self.selected, self.total)

    @property
    def min_group(self) -> int:
        return min(self.odds_by_group)

    @property
    def max_group(self) -> int:
        return max(self.odds_by_group)

    def group_odds(self, group: int) -> float:
        """
        Cuota para un grupo de `group` aciertos.

        Por encima del mayor grupo configurado se usa la cuota de ese grupo
        (tope en el máximo). Un grupo no configurado que no supera el máximo
        es un error de configuración.
        """
        if group > self.max_group:
            return self.odds_by_group[self.max_group]
        try:
            return self.odds_by_group[group]
        except KeyError:
            raise MissingOddsError(group, tuple(self.odds_by_group)) from None


# -----------------------------
# Selección del jugador
# -----------------------------

@dataclass(frozen=True)
class SystemBet:
    group_size: int  # tamaño de cada subcombinación
    pool_size: int   # números elegidos por el jugador

    def __post_init__(self):
        if self.group_size < 1:
            raise InvalidParameterError(f"Tamaño de grupo no positivo: {self.group_size}")
        if self.group_size > self.pool_size:
            raise InvalidParameterError(
                f"Sistema {self.group_size}/{self.pool_size}: el grupo supera los números elegidos"
            )

    @property
    def combination(self) -> BinomialValue:
        return BinomialValue.of(self.group_size, self.pool_size)

    @property
    def ticket_count(self) -> int:
        return binomial(self.pool_size, self.group_size)

    def __str__(self) -> str:
        return str(self.combination)


@dataclass(frozen=True)
class PlayerChoice:
    numbers: tuple[int, ...]
    stake: float
    system_bets: tuple[SystemBet, ...]

    def __post_init__(self):
        numbers = tuple(self.numbers)
        if not numbers:
            raise InvalidParameterError("La selección no contiene números")
        if len(set(numbers)) != len(numbers):
            raise InvalidParameterError(f"Números repetidos en la selección: {list(numbers)}")
        if not (math.isfinite(self.stake) and self.stake > 0):
            raise InvalidParameterError(f"La apuesta debe ser positiva y finita: {self.stake}")

        systems: dict[int, SystemBet] = {}
        for bet in self.system_bets:
            if bet.pool_size != len(numbers):
                raise InvalidParameterError(
                    f"Sistema {bet} no corresponde a {len(numbers)} números elegidos"
                )
            # un grupo repetido se queda con su primera aparición
            systems.setdefault(bet.group_size, bet)
        if not systems:
            raise EmptySystemsError("La selección no contiene ningún sistema")

        object.__setattr__(self, "numbers", tuple(sorted(numbers)))
        object.__setattr__(self, "stake", float(self.stake))
        object.__setattr__(self, "system_bets", tuple(systems.values()))

    @classmethod
    def with_systems(cls, numbers: Iterable[int], stake: float, groups: Iterable[int]) -> "PlayerChoice":
        """Atajo: crea un SystemBet por cada tamaño de grupo sobre todos los números."""
        numbers = tuple(numbers)
        return cls(numbers, stake, tuple(SystemBet(g, len(numbers)) for g in groups))

    @property
    def bullets(self) -> int:
        return len(self.numbers)

    @property
    def min_group(self) -> int:
        return min(b.group_size for b in self.system_bets)

    @property
    def max_group(self) -> int:
        return max(b.group_size for b in self.system_bets)

    @property
    def total_tickets(self) -> int:
        return sum(b.ticket_count for b in self.system_bets)

    @property
    def stake_per_ticket(self) -> float:
        # todas las apuestas virtuales reciben la misma parte
        return self.stake / self.total_tickets


# -----------------------------
# Resultado
# -----------------------------

@dataclass(frozen=True)
class WinningCombination:
    system_bet: SystemBet
    odds: float
    combinations: BinomialValue  # C(hit, group)

    @property
    def weight(self) -> float:
        return self.odds * self.combinations.value

    def __str__(self) -> str:
        return f"{{{self.combinations} odd: {self.odds}}}"


@dataclass(frozen=True)
class HitOutcome:
    hit: int
    contributing_combinations: tuple[WinningCombination, ...]
    stake_per_ticket: float
    payout: float
    probability_exact: Fraction = field(repr=False)

    @property
    def probability(self) -> float:
        return float(self.probability_exact)

    @property
    def total_winning_combinations(self) -> int:
        return sum(c.combinations.value for c in self.contributing_combinations)

    @property
    def offered_odds(self) -> float:
        return self.payout / self.stake_per_ticket


@dataclass(frozen=True)
class Betslip:
    outcomes: tuple[HitOutcome, ...]

    def __post_init__(self):
        hits = [o.hit for o in self.outcomes]
        if hits != sorted(set(hits)):
            raise InvalidParameterError(f"Aciertos desordenados o repetidos: {hits}")
        object.__setattr__(self, "outcomes", tuple(self.outcomes))

    def __iter__(self) -> Iterator[HitOutcome]:
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    @property
    def hits(self) -> tuple[int, ...]:
        return tuple(o.hit for o in self.outcomes)

    def outcome_for(self, hit: int) -> HitOutcome:
        for outcome in self.outcomes:
            if outcome.hit == hit:
                return outcome
        raise KeyError(hit)
