"""Check-digit validation for Brazilian taxpayer documents (CPF and CNPJ).

Pipeline:
    normalize -> guard_trivial -> is_cpf_valid | is_cnpj_valid

Every function here is pure. Nothing is logged: callers decide what to
record, and raw document numbers must never reach a log line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .errors import INVALID_DOCUMENT_MESSAGE, DigitParseError, InvalidDocumentError

CPF_LENGTH = 11
CNPJ_LENGTH = 14
MASK_CHARS = (".", "-", "/")
ASCII_DIGITS = frozenset("0123456789")

CPF_FIRST_WEIGHTS: tuple[int, ...] = tuple(range(10, 1, -1))
CPF_SECOND_WEIGHTS: tuple[int, ...] = tuple(range(11, 1, -1))
CNPJ_FIRST_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_SECOND_WEIGHTS: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


class DocumentKind(str, Enum):
    """Length class of a normalized candidate."""

    PERSON = "cpf"
    ENTITY = "cnpj"
    OTHER = "other"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of check_document; error is set only when validation could not run."""

    document: str
    kind: DocumentKind
    valid: bool
    error: str | None = None

    @property
    def rejected(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "document": self.document,
            "kind": self.kind.value,
            "valid": self.valid,
            "error": self.error,
        }


def normalize(document: str) -> str:
    """Strip '.', '-' and '/' then surrounding whitespace."""
    for char in MASK_CHARS:
        document = document.replace(char, "")
    return document.strip()


def kind_of(candidate: str) -> DocumentKind:
    if len(candidate) == CPF_LENGTH:
        return DocumentKind.PERSON
    if len(candidate) == CNPJ_LENGTH:
        return DocumentKind.ENTITY
    return DocumentKind.OTHER


def guard_trivial(candidate: str) -> None:
    """Reject documents the tax authority never issues.

    A candidate of CPF or CNPJ length passes as soon as one character differs
    from the first; a uniform sequence such as ``00000000000`` is rejected.
    Any other length is rejected without looking at the content.

    Raises:
        InvalidDocumentError: wrong length or uniform sequence.
    """
    if len(candidate) in (CPF_LENGTH, CNPJ_LENGTH):
        first = candidate[0]
        for char in candidate:
            if char != first:
                return
    raise InvalidDocumentError(INVALID_DOCUMENT_MESSAGE)


def to_digits(candidate: str) -> list[int]:
    """Return candidate as a list of ints; raise DigitParseError on any non-ASCII digit."""
    if not set(candidate) <= ASCII_DIGITS:
        raise DigitParseError(f"Document must contain only digits 0-9 (length {len(candidate)})")
    return [int(char) for char in candidate]


def check_digit(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Weighted modulo-11 check digit: rest < 2 -> 0, else 11 - rest."""
    total = sum(digit * weight for digit, weight in zip(digits, weights))
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def _two_digit_check(
    digits: list[int],
    first_weights: Sequence[int],
    second_weights: Sequence[int],
) -> bool:
    if check_digit(digits[: len(first_weights)], first_weights) != digits[-2]:
        return False
    return check_digit(digits[: len(second_weights)], second_weights) == digits[-1]


def is_cpf_valid(candidate: str) -> bool:
    """Return True if an 11-digit candidate carries correct CPF check digits."""
    if len(candidate) != CPF_LENGTH:
        return False
    return _two_digit_check(to_digits(candidate), CPF_FIRST_WEIGHTS, CPF_SECOND_WEIGHTS)


def is_cnpj_valid(candidate: str) -> bool:
    """Return True if a 14-digit candidate carries correct CNPJ check digits."""
    if len(candidate) != CNPJ_LENGTH:
        return False
    return _two_digit_check(to_digits(candidate), CNPJ_FIRST_WEIGHTS, CNPJ_SECOND_WEIGHTS)


def is_cpf_cnpj_valid(document: str) -> bool:
    """Validate an already-normalized CPF or CNPJ.

    Raises:
        InvalidDocumentError: raised by guard_trivial.
        DigitParseError: the candidate holds non-digit characters.
    """
    guard_trivial(document)
    return is_cpf_valid(document) or is_cnpj_valid(document)


def check_document(raw: str) -> ValidationResult:
    """Normalize and validate raw, reporting guard and parse failures as data."""
    candidate = normalize(raw)
    kind = kind_of(candidate)
    try:
        valid = is_cpf_cnpj_valid(candidate)
    except (InvalidDocumentError, DigitParseError) as exc:
        return ValidationResult(candidate, kind, False, str(exc))
    return ValidationResult(candidate, kind, valid)
