"""Mask formatting and check-digit generation."""

from __future__ import annotations

from .validators import (
    CNPJ_FIRST_WEIGHTS,
    CNPJ_LENGTH,
    CNPJ_SECOND_WEIGHTS,
    CPF_FIRST_WEIGHTS,
    CPF_LENGTH,
    CPF_SECOND_WEIGHTS,
    DocumentKind,
    check_digit,
    kind_of,
    normalize,
    to_digits,
)


def _check_digits(base: str, first_weights: tuple[int, ...], second_weights: tuple[int, ...]) -> str:
    if len(base) != len(first_weights):
        raise ValueError(f"Expected {len(first_weights)} base digits, got {len(base)}")
    digits = to_digits(base)
    first = check_digit(digits, first_weights)
    second = check_digit([*digits, first], second_weights)
    return f"{first}{second}"


def cpf_check_digits(base: str) -> str:
    """Return the two CPF check digits for a 9-digit base."""
    return _check_digits(base, CPF_FIRST_WEIGHTS, CPF_SECOND_WEIGHTS)


def cnpj_check_digits(base: str) -> str:
    """Return the two CNPJ check digits for a 12-digit base."""
    return _check_digits(base, CNPJ_FIRST_WEIGHTS, CNPJ_SECOND_WEIGHTS)


def format_cpf(document: str) -> str:
    n = normalize(document)
    if len(n) != CPF_LENGTH:
        return document
    return f"{n[0:3]}.{n[3:6]}.{n[6:9]}-{n[9:11]}"


def format_cnpj(document: str) -> str:
    n = normalize(document)
    if len(n) != CNPJ_LENGTH:
        return document
    return f"{n[0:2]}.{n[2:5]}.{n[5:8]}/{n[8:12]}-{n[12:14]}"


def format_document(document: str) -> str:
    """Apply the CPF or CNPJ mask according to the normalized length."""
    kind = kind_of(normalize(document))
    if kind is DocumentKind.PERSON:
        return format_cpf(document)
    if kind is DocumentKind.ENTITY:
        return format_cnpj(document)
    return document
