"""Codec JSON para intercambiar Money como registros planos."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from dinero.domain.exceptions import InvalidAmountError
from dinero.domain.money import DEFAULT_CURRENCY, Money


class MoneyJsonCodec:
    def __init__(self, default_currency: str = DEFAULT_CURRENCY) -> None:
        self.default_currency = default_currency

    def dumps(self, money: Money) -> str:
        return json.dumps(money.to_record().to_dict(), ensure_ascii=False)

    def loads(self, text: str) -> Money:
        payload = self._decode(text)
        if not isinstance(payload, dict):
            raise InvalidAmountError(payload)
        return Money.from_record(payload, self.default_currency)

    def dumps_many(self, values: Iterable[Money]) -> str:
        return json.dumps(
            [money.to_record().to_dict() for money in values],
            ensure_ascii=False,
            indent=2,
        )

    def loads_many(self, text: str) -> list[Money]:
        payload = self._decode(text)
        if not isinstance(payload, list):
            raise InvalidAmountError(payload)
        return [Money.from_record(item, self.default_currency) for item in payload]

    @staticmethod
    def _decode(text: str) -> Any:
        try:
            # parse_float evita que 19.99 pase por float
            return json.loads(text, parse_float=str)
        except json.JSONDecodeError as e:
            raise InvalidAmountError(text) from e
