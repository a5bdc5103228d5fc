from __future__ import annotations


class BetslipError(Exception):
    """Base de todos los errores del cálculo de boletos."""


class InvalidParameterError(BetslipError, ValueError):
    """Parámetro inválido detectado al construir un objeto de valor."""


class EmptySystemsError(BetslipError, ValueError):
    """La selección del jugador no contiene ningún sistema."""


class MissingOddsError(BetslipError, LookupError):
    """No hay cuota configurada para un tamaño de grupo, ni siquiera aplicando el tope."""

    def __init__(self, group: int, configured: tuple[int, ...] = ()):
        self.group = group
        self.configured = configured
        msg = f"Sin cuota para el grupo {group}"
        if configured:
            msg += f" (grupos configurados: {list(configured)})"
        super().__init__(msg)
