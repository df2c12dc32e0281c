"""
Receipt content: formatting helpers, line items and the PDF story.
"""
from datetime import date

from reportlab.platypus import Paragraph, Table

from recibos.config import Settings
from recibos.ir import EmployeeRecord
from recibos.render.pdf import build_receipt_story, render_receipt_pdf
from recibos.render.template import (
    format_currency,
    format_date_pt,
    receipt_filename,
    receipt_line_items,
    safe_filename_part,
)


def _texts(story):
    return [f.getPlainText() for f in story if isinstance(f, Paragraph)]


class TestFormatting:

    def test_currency(self):
        assert format_currency(1234.5) == "$ 1234.50"
        assert format_currency(0) == "$ 0.00"
        assert format_currency("2000") == "$ 2000.00"

    def test_currency_missing_or_text_is_zero(self):
        assert format_currency(None) == "$ 0.00"
        assert format_currency("a combinar") == "$ 0.00"

    def test_currency_symbol_override(self):
        assert format_currency(10, symbol="R$") == "R$ 10.00"

    def test_date(self):
        assert format_date_pt(date(2026, 10, 19)) == "19 de outubro de 2026"
        assert format_date_pt(date(2025, 3, 1)) == "1 de março de 2025"

    def test_filename(self, issued_on):
        assert receipt_filename("Ana Souza", issued_on) == "Recibo - Ana Souza - 19 de outubro de 2026.pdf"

    def test_filename_has_no_path_separators(self):
        assert safe_filename_part("Ana/Bia\\Carla") == "Ana-Bia-Carla"
        assert safe_filename_part("   ") == "sem nome"


class TestLineItems:

    def test_all_present(self):
        record = EmployeeRecord(
            name="Ana", diasDiurnos=22, diasNoturnos=0, baseSalary=1000,
            beneficios=100, bonus5=50, descontos=20, total=1130,
        )
        assert receipt_line_items(record) == [
            ("Dias Diurnos", "22", False),
            ("Dias Noturnos", "0", False),
            ("Salário Base", "$ 1000.00", False),
            ("Benefícios", "$ 100.00", False),
            ("Bônus de 5%", "$ 50.00", False),
            ("Descontos", "-$ 20.00", True),
        ]

    def test_zero_extras_are_hidden(self):
        record = EmployeeRecord(name="Ana", baseSalary=1000, beneficios=0, bonus5=0, descontos=0, total=1000)
        assert [label for label, _, _ in receipt_line_items(record)] == ["Salário Base"]

    def test_name_only(self):
        assert receipt_line_items(EmployeeRecord(name="Ana")) == []


class TestReceiptStory:

    def test_header_and_totals(self, issued_on):
        record = EmployeeRecord(name="Ana Souza", baseSalary=1000, descontos=20, total=980)
        texts = _texts(build_receipt_story(record, 7, issued_on))

        assert texts[0] == "Recibo"
        assert "Recibo nº: 7" in texts
        assert "Data: 19 de outubro de 2026" in texts
        assert "Cliente: Ana Souza" in texts
        assert "Valor Final: $ 980.00" in texts
        assert "Condições de pagamento: Binance" in texts
        assert any("Valor Total: $ 980.00" in t for t in texts)

    def test_missing_total_renders_zero(self, issued_on):
        texts = _texts(build_receipt_story(EmployeeRecord(name="Ana"), 1, issued_on))
        assert "Valor Final: $ 0.00" in texts

    def test_table_rows(self, issued_on):
        record = EmployeeRecord(name="Ana", baseSalary=1000, bonus5=50, total=1050)
        tables = [f for f in build_receipt_story(record, 1, issued_on) if isinstance(f, Table)]

        assert len(tables) == 1
        rows = tables[0]._cellvalues
        assert [row[0].getPlainText() for row in rows] == ["DESCRIÇÃO", "Salário Base", "Bônus de 5%"]
        assert rows[1][1].getPlainText() == "$ 1000.00"

    def test_markup_in_name_is_escaped(self, issued_on):
        texts = _texts(build_receipt_story(EmployeeRecord(name="Ana <b>& Cia"), 1, issued_on))
        assert "Cliente: Ana <b>& Cia" in texts

    def test_settings_drive_currency_and_payment(self, issued_on):
        settings = Settings(CURRENCY_SYMBOL="R$", PAYMENT_CONDITION="Pix")
        record = EmployeeRecord(name="Ana", total=10)
        texts = _texts(build_receipt_story(record, 1, issued_on, settings))
        assert "Valor Final: R$ 10.00" in texts
        assert "Condições de pagamento: Pix" in texts


def test_render_pdf_bytes(issued_on):
    record = EmployeeRecord(name="Ana Souza", baseSalary=1000, total=1000)
    content = render_receipt_pdf(record, 1, issued_on)
    assert content.startswith(b"%PDF")
    assert len(content) > 500
