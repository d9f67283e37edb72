"""Registro plano de intercambio para montos (storage, APIs, wire)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

# Formato anterior del registro: solo centavos + moneda
LEGACY_MINOR_UNITS_KEY = "cents"


@dataclass(frozen=True)
class MoneyRecord:
    """
    Forma serializada de un Money.

    major_units es opcional; si falta, minor_units es obligatorio.
    La validación numérica ocurre en Money.from_record, no aquí.
    """

    major_units: Optional[str] = None
    minor_units: Optional[str] = None
    currency: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "majorUnits": self.major_units,
            "minorUnits": self.minor_units,
            "currency": self.currency,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MoneyRecord:
        if not isinstance(data, Mapping):
            raise TypeError(f"Se esperaba un mapping, se obtuvo {type(data).__name__}")
        minor = data.get("minorUnits")
        if minor is None:
            minor = data.get(LEGACY_MINOR_UNITS_KEY)
        return cls(
            major_units=_as_text(data.get("majorUnits")),
            minor_units=_as_text(minor),
            currency=_as_text(data.get("currency")),
        )


def _as_text(value: object) -> Optional[str]:
    if value is None:
        return None
    return str(value).strip()
