"""Caso de uso: normaliza registros monetarios a centavos enteros con la política configurada."""

import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from dinero.application.config import MoneyConfig
from dinero.application.dtos import NormalizationReport
from dinero.application.ports.record_store import RecordReader, RecordWriter
from dinero.domain.exceptions import MoneyError
from dinero.domain.money import Money

logger = structlog.get_logger()


@dataclass(frozen=True)
class NormalizeRecordsUseCase:
    reader: RecordReader
    writer: RecordWriter
    config: MoneyConfig

    def execute(self, source: Path, target: Path) -> NormalizationReport:
        run_id = str(uuid.uuid4())
        report = NormalizationReport(run_id=run_id)
        log = logger.bind(run_id=run_id, source=str(source))

        try:
            raw_records = self.reader.read(source)
            report.total_records = len(raw_records)
            if not raw_records:
                report.status = "EMPTY"
                log.info("records_empty")
                return report

            for index, raw in enumerate(raw_records):
                self._normalize_one(index, raw, report)

            if report.normalized_count:
                self.writer.write([record.to_dict() for record in report.records], target)

            if not report.errors:
                report.status = "SUCCESS"
            elif report.normalized_count:
                report.status = "PARTIAL"
            else:
                report.status = "ERROR"

        except Exception as e:
            report.status = "ERROR"
            log.error("normalization_fatal_error", error=str(e))

        finally:
            log.info(
                "records_normalized",
                status=report.status,
                total=report.total_records,
                normalized=report.normalized_count,
                errors=report.error_count,
            )

        return report

    def _normalize_one(self, index: int, raw: Any, report: NormalizationReport) -> None:
        try:
            money = Money.from_record(raw, self.config.default_currency)
            rounded = money.round_to_minor_unit(self.config.rounding)
        except MoneyError as e:
            report.error_count += 1
            report.errors.append({"row_index": index, "record": raw, "error": str(e)})
            logger.warning("record_rejected", row_index=index, error=str(e))
            return

        if not rounded.equals(money):
            logger.debug(
                "record_rounded",
                row_index=index,
                original=str(money.amount),
                rounded=rounded.to_fixed(self.config.display_digits),
            )
        report.records.append(rounded.to_record())
        report.add_to_total(rounded)
        report.normalized_count += 1
