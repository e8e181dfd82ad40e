from pathlib import Path

import pytest
from openpyxl import Workbook

from freight.config import Settings
from freight.data.warehouse_repository import get_warehouses
from freight.models.domain import Warehouse


def _workbook(path: Path, rows: list[tuple]) -> Path:
    wb = Workbook()
    sheet = wb.active
    for row in rows:
        sheet.append(row)
    wb.save(path)
    return path


def test_service_codes_from_comma_separated_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FREIGHT_CORREIOS_SERVICES", "04014, 04510")

    assert Settings().correios_services == ("04014", "04510")


def test_service_codes_from_json_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FREIGHT_CORREIOS_SERVICES", '["04162", "04669"]')

    assert Settings().correios_services == ("04162", "04669")


def test_warehouses_from_json_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FREIGHT_WAREHOUSES", '[{"name": "CD Recife", "postal_code": "50010-000"}]')

    assert get_warehouses(Settings()) == (Warehouse(name="CD Recife", postal_code="50010-000"),)


def test_default_warehouses():
    assert [w.name for w in get_warehouses(Settings())] == ["CD São Paulo", "CD Belo Horizonte"]


def test_warehouses_from_workbook(tmp_path: Path):
    path = _workbook(
        tmp_path / "warehouses.xlsx",
        [
            ("Name", "PostalCode"),
            (" CD Curitiba ", "80010-000"),
            (None, "99999-999"),
            ("CD Sem CEP", None),
            ("CD Porto Alegre", "90010-000"),
        ],
    )

    warehouses = get_warehouses(Settings(warehouses_file=path))

    assert warehouses == (
        Warehouse(name="CD Curitiba", postal_code="80010-000"),
        Warehouse(name="CD Porto Alegre", postal_code="90010-000"),
    )


def test_numeric_postal_codes_keep_leading_zero(tmp_path: Path):
    path = _workbook(
        tmp_path / "numeric.xlsx",
        [
            ("Name", "PostalCode"),
            ("CD São Paulo", 1001000),
            ("CD Texto", "1001000"),
            ("CD Belo Horizonte", "30130-010"),
        ],
    )

    warehouses = get_warehouses(Settings(warehouses_file=path))

    assert [w.postal_code for w in warehouses] == ["01001000", "01001000", "30130-010"]


def test_workbook_missing_columns(tmp_path: Path):
    path = _workbook(tmp_path / "bad.xlsx", [("DC", "CEP"), ("CD X", "01001-000")])

    with pytest.raises(ValueError, match="PostalCode"):
        get_warehouses(Settings(warehouses_file=path))


def test_workbook_not_found(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        get_warehouses(Settings(warehouses_file=tmp_path / "missing.xlsx"))
