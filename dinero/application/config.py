"""Configuración de la aplicación cargada desde YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from dinero.domain.money import DEFAULT_CURRENCY, MINOR_UNIT_DIGITS
from dinero.domain.rounding import RoundingPolicy


@dataclass(frozen=True)
class MoneyConfig:
    default_currency: str = DEFAULT_CURRENCY
    rounding: RoundingPolicy = RoundingPolicy.HALF_UP
    display_digits: int = MINOR_UNIT_DIGITS


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"


@dataclass(frozen=True)
class AppConfig:
    money: MoneyConfig = field(default_factory=MoneyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: str | Path) -> AppConfig:
    """Carga y valida la configuración desde un archivo YAML."""
    path = Path(config_path).resolve()
    if not path.exists():
        msg = f"Archivo de configuración no encontrado: {path}"
        raise FileNotFoundError(msg)

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    # Un archivo vacío equivale a usar todos los defaults
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        msg = f"YAML inválido: se esperaba dict, se obtuvo {type(raw).__name__}"
        raise ValueError(msg)

    return AppConfig(
        money=_build_money_config(raw.get("money") or {}),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )


def _build_money_config(data: dict[str, Any]) -> MoneyConfig:
    """Construye MoneyConfig, convirtiendo el nombre de la política a RoundingPolicy."""
    data = dict(data)  # shallow copy
    if "default_currency" in data:
        currency = str(data["default_currency"] or "").strip()
        if not currency:
            msg = "money.default_currency no puede estar vacío"
            raise ValueError(msg)
        data["default_currency"] = currency
    if "rounding" in data:
        data["rounding"] = RoundingPolicy.parse(data["rounding"])
    if "display_digits" in data:
        digits = data["display_digits"]
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
            msg = f"money.display_digits debe ser un entero no negativo: {digits!r}"
            raise ValueError(msg)
    return MoneyConfig(**data)
