"""Exception hierarchy for document validation and scanning."""

from __future__ import annotations

INVALID_DOCUMENT_MESSAGE = "The number entered is not a valid Cpf or Cnpj for consultation"


class BrTaxIdError(Exception):
    """Base exception for all brtaxid errors."""


class InvalidDocumentError(BrTaxIdError):
    """Document has the wrong length or is a trivial (uniform) sequence."""

    def __init__(self, message: str = INVALID_DOCUMENT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class DigitParseError(BrTaxIdError, ValueError):
    """Candidate contains characters other than ASCII digits."""


class UnsupportedFileError(BrTaxIdError, ValueError):
    """File type cannot be extracted by the scanner."""
