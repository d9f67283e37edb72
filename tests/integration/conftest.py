"""Integration test fixtures: JSON record file factories and a wired use case.

Real components: JsonRecordStore, NormalizeRecordsUseCase, MoneyJsonCodec.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from dinero.application.config import MoneyConfig
from dinero.application.use_cases.normalize_records import NormalizeRecordsUseCase
from dinero.domain.rounding import RoundingPolicy
from dinero.infrastructure.json_record_store import JsonRecordStore


# ── Record Factories ─────────────────────────────────────────────────


def create_records_file(path: Path, records: list[dict[str, Any]]) -> Path:
    """Write records as a JSON list, the shape JsonRecordStore expects."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    return path


def read_records_file(path: Path) -> list[dict[str, Any]]:
    return json.loads(path.read_text(encoding="utf-8"))


MIXED_RECORDS = [
    {"majorUnits": "19.99", "minorUnits": "1999", "currency": "USD"},
    {"minorUnits": "98.5", "currency": "USD"},
    {"cents": 2000, "currency": "EUR"},
    {"majorUnits": "400,000", "currency": "USD"},
    {"minorUnits": "nope", "currency": "EUR"},
]


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture
def store() -> JsonRecordStore:
    return JsonRecordStore()


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    return create_records_file(tmp_path / "in" / "records.json", MIXED_RECORDS)


@pytest.fixture
def target_file(tmp_path: Path) -> Path:
    return tmp_path / "out" / "normalized.json"


@pytest.fixture
def make_use_case(store: JsonRecordStore):
    def _make(rounding: RoundingPolicy = RoundingPolicy.HALF_UP, default_currency: str = "USD"):
        config = MoneyConfig(default_currency=default_currency, rounding=rounding)
        return NormalizeRecordsUseCase(reader=store, writer=store, config=config)

    return _make
