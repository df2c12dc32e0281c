from datetime import date, datetime

import numpy as np
import pandas as pd

from recibos.extractors.excel.data_cleaner import DataCleaner


class _RichText:
    def __init__(self, plain):
        self.plain = plain


def test_empty_values():
    for value in (None, float("nan"), pd.NaT, "", "   "):
        assert DataCleaner.is_empty(value)
    for value in (0, 0.0, "0", "Ana"):
        assert not DataCleaner.is_empty(value)


def test_empty_row():
    assert DataCleaner.is_empty_row([])
    assert DataCleaner.is_empty_row([None, " ", float("nan")])
    assert not DataCleaner.is_empty_row([None, 0])


def test_clean_cell_unwraps_numpy_and_strips():
    assert DataCleaner.clean_cell(np.int64(22)) == 22
    assert type(DataCleaner.clean_cell(np.int64(22))) is int
    assert DataCleaner.clean_cell(np.float64("nan")) is None
    assert DataCleaner.clean_cell("  Ana  ") == "Ana"


def test_cell_to_str():
    assert DataCleaner.cell_to_str("  Nome ") == "Nome"
    assert DataCleaner.cell_to_str(1234.0) == "1234"
    assert DataCleaner.cell_to_str(date(2026, 10, 19)) == "19/10/2026"
    assert DataCleaner.cell_to_str(datetime(2026, 10, 19, 8, 30)) == "19/10/2026 08:30"
    assert DataCleaner.cell_to_str(pd.Timestamp("2026-10-19")) == "19/10/2026"
    assert DataCleaner.cell_to_str(_RichText(" Salário Base ")) == "Salário Base"
    assert DataCleaner.cell_to_str(None) == ""
