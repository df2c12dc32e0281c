"""
recibos: planilha ou foto da folha de pagamento → ZIP de recibos em PDF.
"""

from recibos.errors import (
    EmptyInputError,
    NoValidRecordsError,
    ReceiptError,
    RecognitionError,
    UnsupportedFileError,
)
from recibos.ir import EmployeeRecord, ParseResult
from recibos.packager import generate_receipts
from recibos.router import parse_file

__version__ = "0.1.0"

__all__ = [
    "EmployeeRecord",
    "EmptyInputError",
    "NoValidRecordsError",
    "ParseResult",
    "ReceiptError",
    "RecognitionError",
    "UnsupportedFileError",
    "generate_receipts",
    "parse_file",
]
