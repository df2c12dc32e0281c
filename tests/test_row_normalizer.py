import pytest

from recibos.extractors.excel.column_detector import ColumnDetector
from recibos.extractors.excel.row_normalizer import RowNormalizer

HEADERS = ["Nome", "Salário Base", "Benefícios", "Bônus de 5%", "Descontos"]


@pytest.fixture
def normalizer():
    return RowNormalizer(HEADERS, ColumnDetector().detect(HEADERS))


def test_total_derived_from_components(normalizer):
    record = normalizer.normalize(["Ana", 1000, 100, 50, 20])
    assert record.name == "Ana"
    assert record.base_salary == 1000
    assert record.total == 1130


def test_missing_terms_count_as_zero(normalizer):
    record = normalizer.normalize(["Ana", 1000, None, "", 20])
    assert record.beneficios is None
    assert record.bonus5 is None
    assert record.total == 980


def test_numeric_text_is_coerced(normalizer):
    record = normalizer.normalize(["Ana", " 1500.5 ", "100", 0, 0])
    assert record.base_salary == 1500.5
    assert record.beneficios == 100
    assert isinstance(record.beneficios, int)
    assert record.total == 1600.5


def test_non_numeric_text_kept_verbatim_and_counts_as_zero(normalizer):
    record = normalizer.normalize(["Ana", 1000, "vale refeição", "1.000,50", 0])
    assert record.beneficios == "vale refeição"
    assert record.bonus5 == "1.000,50"
    assert record.total == 1000


def test_no_base_salary_means_no_derived_total(normalizer):
    record = normalizer.normalize(["Ana", None, 100, 50, 0])
    assert record.total is None


def test_supplied_total_is_kept():
    headers = HEADERS + ["Total"]
    normalizer = RowNormalizer(headers, ColumnDetector().detect(headers))
    record = normalizer.normalize(["Ana", 1000, 100, 50, 20, 999])
    assert record.total == 999


@pytest.mark.parametrize("row", [[], [None, None], ["", "  ", None, None, None]])
def test_empty_rows_are_skipped(normalizer, row):
    assert normalizer.normalize(row) is None


@pytest.mark.parametrize("name", [None, "", "   "])
def test_rows_without_name_are_dropped(normalizer, name):
    assert normalizer.normalize([name, 1000, 0, 0, 0]) is None


def test_short_rows_are_accepted(normalizer):
    record = normalizer.normalize(["Ana", 1000])
    assert record.total == 1000


def test_normalize_rows_filters(normalizer):
    rows = [["Ana", 1000, 0, 0, 0], [], [None, 500, 0, 0, 0], ["Bia", 2000, 0, 0, 100]]
    records = normalizer.normalize_rows(rows)
    assert [r.name for r in records] == ["Ana", "Bia"]
    assert [r.total for r in records] == [1000, 1900]


def test_numeric_name_becomes_text(normalizer):
    record = normalizer.normalize([1234, 1000, 0, 0, 0])
    assert record.name == "1234"


def test_supplied_zero_total_is_kept():
    headers = ["Nome", "Salário Base", "Total"]
    normalizer = RowNormalizer(headers, ColumnDetector().detect(headers))
    record = normalizer.normalize(["Ana", 1000, 0])
    assert record.total == 0
