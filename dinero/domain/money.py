"""Value object Money: monto decimal exacto asociado a un código de moneda."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from typing import Any, Union

from dinero.domain.exceptions import CurrencyMismatchError, DivisionByZeroError, InvalidAmountError
from dinero.domain.records import MoneyRecord
from dinero.domain.rounding import RoundingPolicy

DEFAULT_CURRENCY = "USD"
MINOR_UNIT_DIGITS = 2
MINOR_UNITS_PER_MAJOR = Decimal(100)

# Dígitos extra sobre los operandos para cocientes periódicos (1/3)
DIVISION_PRECISION = 34

Scalar = Union[str, int, float, Decimal]

_SCALAR_TYPES = (str, int, float, Decimal)
_UNIT = Decimal(1)

# Numeral decimal ASCII estricto: sin "_", sin NaN ni Infinity
_NUMERAL_RE = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")

# Suma, resta, producto y quantize nunca redondean con este contexto
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def parse_amount(value: object) -> Decimal:
    """
    Convierte texto, int, float o Decimal a un Decimal finito.

    El texto se limpia de espacios y separadores de miles (comas).
    Los float pasan por str() para no arrastrar el error binario.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not _NUMERAL_RE.match(text):
            raise InvalidAmountError(value)
        try:
            amount = Decimal(text)
        except InvalidOperation as e:
            raise InvalidAmountError(value) from e
    else:
        raise InvalidAmountError(value)

    if not amount.is_finite():
        raise InvalidAmountError(value)
    return amount


def _is_operand(value: object) -> bool:
    return isinstance(value, (Money, *_SCALAR_TYPES)) and not isinstance(value, bool)


def _plain(value: Decimal) -> str:
    """Notación de punto fijo, sin signo en el cero."""
    if value.is_zero():
        value = value.copy_abs()
    return f"{value:f}"


def _divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    """
    Cociente exacto cuando es finito; si es periódico, redondea.

    Un cociente finito a/b tiene a lo sumo digits(a) + log2(b) dígitos,
    y log2(b) <= digits(b) * log2(10).
    """
    dividend_digits = len(dividend.as_tuple().digits)
    divisor_digits = len(divisor.as_tuple().digits)
    exact = Context(
        prec=dividend_digits + math.ceil(divisor_digits * math.log2(10)) + 2,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[Inexact, InvalidOperation, DivisionByZero, Overflow],
    )
    try:
        return exact.divide(dividend, divisor)
    except Inexact:
        # Periódico: no existe representación exacta
        rounded = Context(
            prec=dividend_digits + divisor_digits + DIVISION_PRECISION,
            Emax=MAX_EMAX,
            Emin=MIN_EMIN,
        )
        return rounded.divide(dividend, divisor)


@dataclass(frozen=True, eq=False)
class Money:
    """
    Value object para montos. Siempre Decimal, nunca float.

    amount está en unidades mayores (dólares, no centavos); los centavos
    se derivan con minor_units. Inmutable: toda operación retorna una
    nueva instancia.

    Usage:
        price = Money("19.99")
        tax = price * Decimal("0.19")
        total = (price + tax).round_to_minor_unit()
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", parse_amount(self.amount))

    # === Construcción ===

    @classmethod
    def from_minor_units(cls, cents: Scalar, currency: str = DEFAULT_CURRENCY) -> Money:
        """Interpreta el valor como centavos (centésimos de la unidad mayor)."""
        return cls(parse_amount(cents).scaleb(-MINOR_UNIT_DIGITS, context=_EXACT), currency)

    @classmethod
    def from_record(
        cls,
        record: MoneyRecord | Mapping[str, Any],
        default_currency: str = DEFAULT_CURRENCY,
    ) -> Money:
        """
        Reconstruye un Money desde su forma serializada.

        majorUnits tiene prioridad; si no viene, minorUnits es obligatorio
        (también se acepta la clave antigua 'cents').
        """
        if not isinstance(record, MoneyRecord):
            try:
                record = MoneyRecord.from_dict(record)
            except TypeError as e:
                raise InvalidAmountError(record) from e

        currency = record.currency or default_currency
        if record.major_units is not None:
            return cls(record.major_units, currency)
        if record.minor_units is not None:
            return cls.from_minor_units(record.minor_units, currency)
        raise InvalidAmountError(record.to_dict())

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(Decimal(0), currency)

    @classmethod
    def total(cls, values: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
        """Suma montos de una misma moneda. Sin montos, retorna cero."""
        result = cls.zero(currency)
        for value in values:
            result = result.plus(value)
        return result

    # === Proyecciones y formato ===

    @property
    def minor_units(self) -> Decimal:
        """Monto en centavos, calculado en cada acceso."""
        return _EXACT.multiply(self.amount, MINOR_UNITS_PER_MAJOR)

    def to_fixed(self, digits: int = 2) -> str:
        """Punto fijo con exactamente `digits` decimales (redondeo half-up, solo display)."""
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
            raise ValueError(f"digits debe ser un entero no negativo: {digits!r}")
        quantized = self.amount.quantize(
            _UNIT.scaleb(-digits), rounding=ROUND_HALF_UP, context=_EXACT
        )
        return _plain(quantized)

    def to_record(self) -> MoneyRecord:
        cents = self.minor_units.quantize(_UNIT, rounding=ROUND_HALF_UP, context=_EXACT)
        return MoneyRecord(
            major_units=self.to_fixed(MINOR_UNIT_DIGITS),
            minor_units=_plain(cents),
            currency=self.currency,
        )

    def __str__(self) -> str:
        return f"{self.to_fixed(MINOR_UNIT_DIGITS)} {self.currency}"

    # === Redondeo ===

    def round_to_major_unit(self, mode: RoundingPolicy | str = RoundingPolicy.HALF_UP) -> Money:
        policy = RoundingPolicy.parse(mode)
        rounded = self.amount.quantize(_UNIT, rounding=policy.value, context=_EXACT)
        return Money(rounded, self.currency)

    def round_to_minor_unit(self, mode: RoundingPolicy | str = RoundingPolicy.HALF_UP) -> Money:
        policy = RoundingPolicy.parse(mode)
        cents = self.minor_units.quantize(_UNIT, rounding=policy.value, context=_EXACT)
        return Money.from_minor_units(cents, self.currency)

    # === Aritmética ===

    def _operand(self, other: Money | Scalar, operation: str) -> Decimal:
        """Punto único de coerción: Money exige misma moneda, un escalar se parsea."""
        if isinstance(other, Money):
            if other.currency != self.currency:
                raise CurrencyMismatchError(self.currency, other.currency, operation)
            return other.amount
        return parse_amount(other)

    def plus(self, other: Money | Scalar) -> Money:
        return Money(_EXACT.add(self.amount, self._operand(other, "plus")), self.currency)

    def minus(self, other: Money | Scalar) -> Money:
        return Money(_EXACT.subtract(self.amount, self._operand(other, "minus")), self.currency)

    def times(self, other: Money | Scalar) -> Money:
        """Money × Money escala por la cantidad del otro, no es un producto dimensional."""
        return Money(_EXACT.multiply(self.amount, self._operand(other, "times")), self.currency)

    def div(self, other: Money | Scalar) -> Money:
        divisor = self._operand(other, "div")
        if divisor.is_zero():
            raise DivisionByZeroError(self)
        return Money(_divide(self.amount, divisor), self.currency)

    def __add__(self, other: object) -> Money:
        if not _is_operand(other):
            return NotImplemented
        return self.plus(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Money:
        if not _is_operand(other):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: object) -> Money:
        if not _is_operand(other):
            return NotImplemented
        return Money(other, self.currency).minus(self)

    def __mul__(self, other: object) -> Money:
        if not _is_operand(other):
            return NotImplemented
        return self.times(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Money:
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> Money:
        return Money(-self.amount, self.currency)

    def __pos__(self) -> Money:
        return self

    def __abs__(self) -> Money:
        return Money(abs(self.amount), self.currency)

    # === Comparación ===

    def equals(self, other: Money | Scalar) -> bool:
        """Monedas distintas no son error: simplemente no son iguales."""
        if isinstance(other, Money):
            return other.currency == self.currency and self.amount == other.amount
        return self.amount == parse_amount(other)

    def less_than(self, other: Money | Scalar) -> bool:
        return self.amount < self._operand(other, "less_than")

    def greater_than(self, other: Money | Scalar) -> bool:
        return self.amount > self._operand(other, "greater_than")

    def __eq__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        try:
            return self.equals(other)
        except InvalidAmountError:
            return False

    def __hash__(self) -> int:
        # Consistente con __eq__ contra escalares: Money(5) == 5
        return hash(self.amount)

    def __lt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.less_than(other)

    def __gt__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.greater_than(other)

    def __le__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.amount <= self._operand(other, "less_equal")

    def __ge__(self, other: object) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.amount >= self._operand(other, "greater_equal")

    def is_zero(self) -> bool:
        return self.amount.is_zero()

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0
