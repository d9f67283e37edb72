"""Políticas de redondeo soportadas por Money."""

from decimal import ROUND_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP
from enum import Enum


class RoundingPolicy(Enum):
    """Regla de desempate al reducir dígitos fraccionarios."""

    DOWN = ROUND_DOWN  # Hacia cero
    HALF_EVEN = ROUND_HALF_EVEN  # Bancario
    HALF_UP = ROUND_HALF_UP  # Empates se alejan de cero
    UP = ROUND_UP  # Se aleja de cero

    @classmethod
    def parse(cls, value: "RoundingPolicy | str") -> "RoundingPolicy":
        """Acepta el miembro, su nombre (cualquier caja) o la forma 'half-up'."""
        if isinstance(value, RoundingPolicy):
            return value
        key = str(value).strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError as e:
            valid = ", ".join(member.name.lower() for member in cls)
            raise ValueError(
                f"Política de redondeo desconocida: '{value}'. Válidas: {valid}"
            ) from e
