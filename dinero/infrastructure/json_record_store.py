"""Lectura/escritura de registros monetarios en archivos JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

logger = structlog.get_logger()


class JsonRecordStore:
    """Implementa RecordReader y RecordWriter sobre un archivo con una lista JSON."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, source: Path) -> list[dict[str, Any]]:
        if not source.exists():
            msg = f"Archivo de registros no encontrado: {source}"
            raise FileNotFoundError(msg)

        # parse_float=str: los montos nunca pasan por float
        payload = json.loads(source.read_text(encoding=self.encoding), parse_float=str)
        if not isinstance(payload, list):
            msg = f"JSON inválido: se esperaba list, se obtuvo {type(payload).__name__}"
            raise ValueError(msg)

        logger.info("records_read", path=str(source), count=len(payload))
        return payload

    def write(self, records: list[dict[str, Any]], target: Path) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = target.with_suffix(target.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps(records, ensure_ascii=False, indent=2) + "\n",
            encoding=self.encoding,
        )
        tmp_path.replace(target)
        logger.info("records_written", path=str(target), count=len(records))
