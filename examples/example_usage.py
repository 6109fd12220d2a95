"""Exemplu: generarea raportului colectiv direct prin service layer (fără Flask).

Controllerele sunt doar un strat subțire; logica de pontaj stă în servicii.
"""

import importlib

from config import get_settings_module

from src.pontaj.pontaj.container import build_container
from src.pontaj.pontaj.reports.layout import default_report_filename


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    grid = container.report_service.generate_collective_report(2024, 2)
    print(grid.title)
    print(f"{len(grid.rows)} angajați, {grid.grand_totals.total_hours} ore, firmă: {grid.labor.company_hours}")

    result = container.report_service.export_report_to_file(grid, default_report_filename(grid))
    print(result.to_dict())


if __name__ == "__main__":
    main()
