"""High-level orchestration: extractor selection + document detection."""

from __future__ import annotations

import logging
import mimetypes
from collections.abc import Callable
from pathlib import Path

from .detectors import Finding, detect
from .errors import UnsupportedFileError

log = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".txt", ".csv", ".pdf"}

SUPPORTED_MIME_TYPES = {
    "text/plain",
    "text/csv",
    "application/pdf",
}

ExtractorFunc = Callable[[Path], tuple[str, str]]


def _pick_extractor(path: Path) -> ExtractorFunc | None:
    """Return the correct extractor function for a file, if supported."""
    from .extractors import from_csv, from_pdf, from_txt

    by_suffix = {".txt": from_txt, ".csv": from_csv, ".pdf": from_pdf}
    extractor = by_suffix.get(path.suffix.lower())
    if extractor is not None:
        return extractor

    mime_type, _ = mimetypes.guess_type(str(path))
    by_mime = {"text/plain": from_txt, "text/csv": from_csv, "application/pdf": from_pdf}
    return by_mime.get(mime_type) if mime_type in SUPPORTED_MIME_TYPES else None


def read_any(path: Path) -> str:
    """Return text content from a supported file type."""
    extractor = _pick_extractor(path)
    if extractor is None:
        raise UnsupportedFileError(f"Unsupported or unknown file type: {path.name}")

    _kind, text = extractor(path)
    return text


def scan_file(input_path: str | Path) -> tuple[list[Finding], str]:
    """Extract text from a file and return (findings, extracted_text)."""
    path = Path(input_path)

    try:
        file_text = read_any(path)
    except UnsupportedFileError as exc:
        log.warning("Skipping scan: %s", exc)
        return [], ""

    findings = detect(file_text, file_name=path.name)
    log.info("Scanned %s: %d document(s) found", path.name, len(findings))
    return findings, file_text
