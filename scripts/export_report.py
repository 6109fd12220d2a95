"""Export the monthly collective report to an .xlsx file.

    python scripts/export_report.py --year 2024 --month 3 --output "Pontaj MARTIE 2024.xlsx"

``--month`` is 1-12 here; it is converted to the zero-based index used by the
report service. Without ``--output`` nothing is written (cancelled).
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.pontaj.pontaj.container import build_container
from src.pontaj.pontaj.core.exceptions import DomainError
from src.pontaj.pontaj.logging_config import setup_logging
from src.pontaj.pontaj.reports.layout import default_report_filename


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export the collective attendance report (xlsx)")
    parser.add_argument("--year", type=int, required=True)
    parser.add_argument("--month", type=int, required=True, help="1-12")
    parser.add_argument("--department", default=None, help="department code filter, e.g. FA")
    parser.add_argument("--output", default=None, help="destination .xlsx (a directory uses the default file name)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(db_config=dict(settings.DB_CONFIG), settings=settings)
    try:
        grid = container.report_service.generate_collective_report(args.year, args.month - 1, args.department)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    destination = args.output
    if destination and Path(destination).is_dir():
        destination = str(Path(destination) / default_report_filename(grid))

    result = container.report_service.export_report_to_file(grid, destination)
    if result.cancelled:
        print("cancelled")
        return 0
    if not result.success:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 1
    print(f"OK: {result.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
