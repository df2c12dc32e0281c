"""
Spreadsheet extraction end to end: workbook on disk → ParseResult.
"""
import pytest
from openpyxl import Workbook

from recibos.errors import EmptyInputError
from recibos.extractors.excel_extractor import ExcelExtractor


class TestExcelExtractor:

    def test_records_and_mapping(self, payroll_xlsx):
        result = ExcelExtractor().parse(payroll_xlsx)

        assert result.source_type == "excel"
        assert result.headers[0] == "Nome"
        assert result.mapping["baseSalary"] == "Salário Base"
        assert result.mapping["total"] is None
        assert "column_not_found:total" in result.warnings

        names = [r.name for r in result.data]
        assert names == ["Ana Souza", "Bruno Lima", "Carla Dias"]

    def test_totals(self, payroll_xlsx):
        data = {r.name: r for r in ExcelExtractor().parse(payroll_xlsx).data}

        assert data["Ana Souza"].total == 1130
        assert data["Bruno Lima"].total == 2100.5
        assert data["Bruno Lima"].beneficios is None
        # non-numeric base salary is kept as text and counts as zero
        assert data["Carla Dias"].base_salary == "a combinar"
        assert data["Carla Dias"].total == 0

    def test_shift_counts_kept(self, payroll_xlsx):
        ana = ExcelExtractor().parse(payroll_xlsx).data[0]
        assert ana.dias_diurnos == 22
        assert ana.dias_noturnos == 0

    def test_nameless_rows_reported(self, payroll_xlsx):
        result = ExcelExtractor().parse(payroll_xlsx)
        assert "rows_without_name_skipped:1" in result.warnings

    def test_payload_uses_original_keys(self, payroll_xlsx):
        payload = ExcelExtractor().parse(payroll_xlsx).to_payload()
        first = payload["data"][0]
        assert first["name"] == "Ana Souza"
        assert first["baseSalary"] == 1000
        assert first["bonus5"] == 50
        assert first["total"] == 1130
        assert "base_salary" not in first

    def test_supplied_total_column(self, tmp_path):
        wb = Workbook()
        ws = wb.active
        ws.append(["Nome do Funcionário", "Base Salary", "Extra", "Bonus", "Health Insurance", "Total"])
        ws.append(["João Silva", 1000, 50, 100, 20, 1170])
        ws.append(["Maria Santos", 2000, 0, 200, 50, 2250])
        path = tmp_path / "test_employees.xlsx"
        wb.save(path)

        result = ExcelExtractor().parse(str(path))

        assert len(result.data) == 2
        assert result.data[0].name == "João Silva"
        assert result.data[0].base_salary == 1000
        assert result.data[0].total == 1170
        assert result.mapping["bonus5"] is None

    def test_leading_blank_rows_are_skipped(self, tmp_path):
        wb = Workbook()
        ws = wb.active
        ws["B3"] = "Nome"
        ws["C3"] = "Salário Base"
        ws["B4"] = "Ana"
        ws["C4"] = 1000
        path = tmp_path / "offset.xlsx"
        wb.save(path)

        result = ExcelExtractor().parse(str(path))
        assert [r.name for r in result.data] == ["Ana"]
        assert result.data[0].total == 1000

    def test_empty_workbook_fails_fast(self, tmp_path):
        path = tmp_path / "empty.xlsx"
        Workbook().save(path)
        with pytest.raises(EmptyInputError, match="empty"):
            ExcelExtractor().parse(str(path))

    def test_csv_input(self, tmp_path):
        path = tmp_path / "folha.csv"
        path.write_text("Nome,Salário Base,Descontos\nAna,1000,100\nBia,2000,\n", encoding="utf-8")

        result = ExcelExtractor().parse(str(path))

        assert [r.name for r in result.data] == ["Ana", "Bia"]
        assert result.data[0].total == 900
        assert result.data[1].total == 2000

    def test_empty_csv_fails_fast(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(EmptyInputError):
            ExcelExtractor().parse(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ExcelExtractor().parse(str(tmp_path / "nope.xlsx"))

    def test_large_sheet_keeps_every_employee(self, tmp_path):
        wb = Workbook()
        ws = wb.active
        ws.append(["Nome", "Salário Base"])
        for i in range(5100):
            ws.append([f"Func {i}", 1000])
        path = tmp_path / "grande.xlsx"
        wb.save(path)

        result = ExcelExtractor().parse(str(path))

        assert len(result.data) == 5100
        assert result.data[-1].name == "Func 5099"
        assert not any(w.startswith("rows_truncated") for w in result.warnings)

    def test_single_column_csv_keeps_full_names(self, tmp_path):
        path = tmp_path / "nomes.csv"
        path.write_text("Nome Completo\nAna Souza\nBia Lima\n", encoding="utf-8")

        result = ExcelExtractor().parse(str(path))

        assert result.headers == ["Nome Completo"]
        assert [r.name for r in result.data] == ["Ana Souza", "Bia Lima"]

    def test_semicolon_csv(self, tmp_path):
        path = tmp_path / "folha.csv"
        path.write_text("Nome;Salário Base;Descontos\nAna Souza;1000;100\n", encoding="utf-8")

        result = ExcelExtractor().parse(str(path))

        assert result.data[0].name == "Ana Souza"
        assert result.data[0].total == 900
