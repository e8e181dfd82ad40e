"""Warehouse loader: workbook when configured, inline settings otherwise."""

from __future__ import annotations

import logging
from pathlib import Path

from openpyxl import load_workbook

from ..config import Settings
from ..models.domain import Warehouse

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"Name", "PostalCode"}


def _normalize_name(name: str) -> str:
    return name.strip()


def _normalize_postal_code(value: object) -> str:
    # Numeric cells drop the leading zero of CEPs such as 01001-000
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value)).zfill(8)
    text = str(value).strip()
    return text.zfill(8) if text.isdigit() else text


def _load_warehouses_from_file(workbook_path: Path) -> tuple[Warehouse, ...]:
    if not workbook_path.exists():
        raise FileNotFoundError(f"Warehouse workbook not found: {workbook_path}")

    wb = load_workbook(workbook_path, data_only=True, read_only=True)
    try:
        sheet = wb.active
        rows = sheet.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Warehouse workbook '{workbook_path}' is empty.")

        header_map = {name: idx for idx, name in enumerate(header)}
        missing_columns = REQUIRED_COLUMNS - set(header_map)
        if missing_columns:
            raise ValueError(f"Warehouse workbook missing columns: {', '.join(sorted(missing_columns))}")

        warehouses: list[Warehouse] = []
        for row in rows:
            name_value = row[header_map["Name"]]
            postal_value = row[header_map["PostalCode"]]
            if not name_value:
                continue
            if not postal_value:
                logger.warning(f"Skipping warehouse '{name_value}' without postal code")
                continue
            warehouses.append(
                Warehouse(name=_normalize_name(str(name_value)), postal_code=_normalize_postal_code(postal_value))
            )
        return tuple(warehouses)
    finally:
        wb.close()


def get_warehouses(app_settings: Settings) -> tuple[Warehouse, ...]:
    """Load the warehouse list once for the lifetime of the process."""
    if app_settings.warehouses_file is not None:
        warehouses = _load_warehouses_from_file(app_settings.warehouses_file)
        logger.info(f"Loaded {len(warehouses)} warehouses from {app_settings.warehouses_file}")
        return warehouses
    return tuple(
        Warehouse(name=_normalize_name(item.name), postal_code=item.postal_code.strip())
        for item in app_settings.warehouses
    )
