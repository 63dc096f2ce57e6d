"""Pattern-based CPF/CNPJ detection in free text, classified by check digits."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass

from .validators import DocumentKind, ValidationResult, check_document

log = logging.getLogger(__name__)

# Order matters: spans claimed by an earlier pattern are skipped.
PATTERNS: dict[str, re.Pattern[str]] = {
    "cnpj": re.compile(r"(?<![0-9])[0-9]{2}\.?[0-9]{3}\.?[0-9]{3}/?[0-9]{4}-?[0-9]{2}(?![0-9])"),
    "cpf": re.compile(r"(?<![0-9])[0-9]{3}\.?[0-9]{3}\.?[0-9]{3}-?[0-9]{2}(?![0-9])"),
}

EXPECTED_KIND: dict[str, DocumentKind] = {
    "cpf": DocumentKind.PERSON,
    "cnpj": DocumentKind.ENTITY,
}

STATUS_VALID = "valid"
STATUS_INVALID = "invalid"
STATUS_REJECTED = "rejected"


@dataclass(slots=True)
class Finding:
    """Single document number found in text."""

    detector: str
    match: str
    start: int
    end: int
    status: str
    why: str

    def to_dict(self) -> dict[str, object]:
        """Return a stable, serializable representation of this finding."""
        return asdict(self)


def _classify(detector: str, result: ValidationResult) -> tuple[str, str]:
    """Return (status, why) for a validated candidate."""
    label = detector.upper()
    if result.rejected:
        return STATUS_REJECTED, f"Rejected: {label} is a repeated-digit sequence."
    if result.valid and result.kind is EXPECTED_KIND[detector]:
        return STATUS_VALID, f"Verified: {label} check digits match."
    return STATUS_INVALID, f"{label} format matched but check digits do not."


def _overlaps(start: int, end: int, spans: list[tuple[int, int]]) -> bool:
    return any(start < taken_end and taken_start < end for taken_start, taken_end in spans)


def detect(text: str, *, file_name: str | None = None) -> list[Finding]:
    """Find CPF and CNPJ numbers in text and return Findings ordered by position."""
    findings: list[Finding] = []
    taken: list[tuple[int, int]] = []

    for detector_name, pattern in PATTERNS.items():
        for match_obj in pattern.finditer(text):
            if _overlaps(match_obj.start(), match_obj.end(), taken):
                continue

            raw_value = match_obj.group(0)
            status, why = _classify(detector_name, check_document(raw_value))
            taken.append((match_obj.start(), match_obj.end()))
            findings.append(
                Finding(
                    detector=detector_name,
                    match=raw_value,
                    start=match_obj.start(),
                    end=match_obj.end(),
                    status=status,
                    why=why,
                )
            )

    findings.sort(key=lambda f: f.start)
    log.debug("Detected %d document(s) in %s", len(findings), file_name or "<text>")
    return findings
