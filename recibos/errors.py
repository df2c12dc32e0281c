"""
Exception hierarchy for the receipt pipeline.

Every failure that reaches a caller is a ``ReceiptError`` carrying a single
user-facing message; per-record problems (bad numbers, missing fields) are
never raised.
"""


class ReceiptError(Exception):
    """Base class for all pipeline failures."""


class EmptyInputError(ReceiptError):
    """The spreadsheet has no rows at all."""


class RecognitionError(ReceiptError):
    """Text recognition over an image failed."""


class NoValidRecordsError(ReceiptError):
    """A batch produced no receipt (empty input or every record lacked a name)."""


class UnsupportedFileError(ReceiptError):
    """The uploaded file type has no extractor."""
