"""Entry point for record normalization.

Usage:
    python scripts/normalize_records.py <source.json> <target.json> [path/to/config.yaml]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import structlog

from dinero.application.config import AppConfig, load_config
from dinero.application.use_cases.normalize_records import NormalizeRecordsUseCase
from dinero.infrastructure.json_record_store import JsonRecordStore
from dinero.infrastructure.logging_config import setup_logging


def main() -> int:
    if len(sys.argv) < 3:
        print(__doc__, file=sys.stderr)
        return 2

    source, target = Path(sys.argv[1]), Path(sys.argv[2])
    config_path = sys.argv[3] if len(sys.argv) > 3 else "configs/configuration.yaml"
    config = load_config(config_path) if Path(config_path).exists() else AppConfig()

    setup_logging(
        log_level=config.logging.level,
        log_dir=Path(config.logging.log_dir) if config.logging.log_to_file else None,
    )
    logger = structlog.get_logger()
    logger.info("normalization_starting", source=str(source), config_path=config_path)

    store = JsonRecordStore()
    use_case = NormalizeRecordsUseCase(reader=store, writer=store, config=config.money)
    report = use_case.execute(source, target)

    logger.info("normalization_finished", **report.summary(config.money.display_digits))
    return 0 if not report.has_errors else 1


if __name__ == "__main__":
    sys.exit(main())
