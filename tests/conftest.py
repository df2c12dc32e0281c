"""
Pytest configuration and shared fixtures.
"""
import os
import sys
from datetime import date

import pytest
from openpyxl import Workbook

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from recibos.config import reset_settings


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    """No settle delay in tests; fresh settings singleton around each test."""
    monkeypatch.setenv("RENDER_SETTLE_SECONDS", "0")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def issued_on():
    return date(2026, 10, 19)


@pytest.fixture
def payroll_xlsx(tmp_path):
    """Spreadsheet with every canonical column except total."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Folha"
    ws.append(["Nome", "Dias Diurnos", "Dias Noturnos", "Salário Base", "Benefícios", "Bônus de 5%", "Descontos"])
    ws.append(["Ana Souza", 22, 0, 1000, 100, 50, 20])
    ws.append(["Bruno Lima", 15, 7, 2000.5, None, 100, None])
    ws.append([None, None, None, None, None, None, None])
    ws.append([None, 10, 0, 900, 0, 0, 0])
    ws.append(["Carla Dias", 20, 2, "a combinar", 0, 0, 0])
    file_path = tmp_path / "folha.xlsx"
    wb.save(file_path)
    return str(file_path)
