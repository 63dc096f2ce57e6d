"""Text extraction from the file types the scanner accepts."""

from __future__ import annotations

import csv
import io
from pathlib import Path

# Spreadsheet exports with a pt-BR locale use ';' and are often Latin-1.
CSV_DELIMITERS = ",;\t|"
TEXT_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


def _decode(raw: bytes) -> str:
    for encoding in TEXT_ENCODINGS[:-1]:
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            continue
    return raw.decode(TEXT_ENCODINGS[-1])


def _sniff_dialect(sample: str) -> type[csv.Dialect] | csv.Dialect:
    try:
        return csv.Sniffer().sniff(sample, delimiters=CSV_DELIMITERS)
    except csv.Error:
        return csv.excel


def from_txt(path: Path) -> tuple[str, str]:
    """Read content from a text file."""
    return "text", _decode(path.read_bytes())


def from_csv(path: Path) -> tuple[str, str]:
    """Read content from a CSV file, one cell per line.

    Cells are never glued together, so digits from neighbouring columns
    cannot form a document number that does not exist in the file.
    """
    content = _decode(path.read_bytes())
    reader = csv.reader(io.StringIO(content, newline=""), _sniff_dialect(content[:4096]))
    cells = [cell.strip() for row in reader for cell in row]
    return "csv", "\n".join(cell for cell in cells if cell)


def from_pdf(path: Path) -> tuple[str, str]:
    """Read content from a PDF file."""
    # pdfminer is heavy; import only when a PDF is actually scanned.
    from pdfminer.high_level import extract_text_to_fp

    output_string = io.StringIO()
    with path.open("rb") as input_file:
        extract_text_to_fp(input_file, output_string)

    return "pdf", output_string.getvalue()
