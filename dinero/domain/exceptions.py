"""Excepciones de dominio del tipo monetario."""


class MoneyError(Exception):
    """Base para errores de operaciones monetarias."""


class InvalidAmountError(MoneyError, ValueError):
    """El monto entregado no es un numeral decimal válido."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Monto inválido: {value!r}")


class CurrencyMismatchError(MoneyError, ValueError):
    """La operación requiere que ambos montos tengan la misma moneda."""

    def __init__(self, expected: str, actual: str, operation: str) -> None:
        self.expected = expected
        self.actual = actual
        self.operation = operation
        super().__init__(
            f"No se puede aplicar '{operation}' entre {expected} y {actual}"
        )


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Se intentó dividir un monto por cero."""

    def __init__(self, dividend: object) -> None:
        self.dividend = dividend
        super().__init__(f"No se puede dividir {dividend} por cero")
