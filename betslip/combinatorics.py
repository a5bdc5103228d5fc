from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .errors import InvalidParameterError


def binomial(n: int, k: int) -> int:
    """
    Coeficiente binomial C(n, k) exacto.

    Usa la recurrencia multiplicativa C(n, i+1) = C(n, i) * (n - i) / (i + 1);
    cada división es exacta porque el producto parcial siempre es un C(n, i+1)
    entero. Devuelve 0 si k > n (no hay selecciones posibles).
    """
    if n < 0 or k < 0:
        raise InvalidParameterError(f"binomial({n}, {k}): argumentos negativos")
    if k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


@dataclass(frozen=True)
class BinomialValue:
    # k elementos elegidos de n, value = C(n, k)
    k: int
    n: int
    value: int

    def __post_init__(self):
        if not 0 <= self.k <= self.n:
            raise InvalidParameterError(f"Combinación {self.k}/{self.n} fuera de rango")
        if self.value != binomial(self.n, self.k):
            raise InvalidParameterError(f"Valor incorrecto para {self.k}/{self.n}: {self.value}")

    @classmethod
    def of(cls, k: int, n: int) -> "BinomialValue":
        return cls(k=k, n=n, value=binomial(n, k))

    def __str__(self) -> str:
        return f"{self.k}/{self.n} ({self.value})"


def hypergeometric(total: int, marked: int, drawn: int, hit: int) -> Fraction:
    """
    Probabilidad exacta de obtener `hit` aciertos al extraer `drawn` bolas sin
    reemplazo de una urna de `total` bolas con `marked` bolas marcadas.

    Fuera del soporte devuelve Fraction(0).
    """
    if min(total, marked, drawn) < 0 or marked > total or drawn > total:
        raise InvalidParameterError(
            f"Urna inválida: total={total}, marcadas={marked}, extraídas={drawn}"
        )
    if hit < 0 or hit > drawn or hit > marked:
        return Fraction(0)
    if drawn - hit > total - marked:
        return Fraction(0)
    favourable = binomial(marked, hit) * binomial(total - marked, drawn - hit)
    return Fraction(favourable, binomial(total, drawn))
