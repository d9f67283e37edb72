"""Ports para lectura y escritura de registros monetarios serializados."""

from pathlib import Path
from typing import Any, Protocol


class RecordReader(Protocol):
    def read(self, source: Path) -> list[dict[str, Any]]:
        """Retorna los registros crudos (majorUnits/minorUnits/currency)."""
        ...


class RecordWriter(Protocol):
    def write(self, records: list[dict[str, Any]], target: Path) -> None: ...
