"""Report generation utilities."""

from __future__ import annotations

import json
from pathlib import Path

from .detectors import Finding

VISIBLE_TAIL = 2


def to_json(findings: list[Finding], outfile: Path, return_as_string: bool = False) -> str | None:
    payload = [f.to_dict() for f in findings]
    json_str = json.dumps(payload, indent=2)

    if return_as_string:
        return json_str

    outfile.parent.mkdir(parents=True, exist_ok=True)
    outfile.write_text(json_str, encoding="utf-8")
    return None


def mask_match(value: str) -> str:
    """Replace every digit except the check digits with '*', keeping punctuation."""
    digit_positions = [i for i, ch in enumerate(value) if ch.isdigit()]
    hidden = set(digit_positions[:-VISIBLE_TAIL])
    return "".join("*" if i in hidden else ch for i, ch in enumerate(value))


def human_summary(findings: list[Finding]) -> str:
    counts: dict[tuple[str, str], int] = {}
    for finding in findings:
        key = (finding.detector, finding.status)
        counts[key] = counts.get(key, 0) + 1

    if not counts:
        return "Findings Summary:\n- No documents detected"

    lines = [f"- {detector} ({status}): {count}" for (detector, status), count in sorted(counts.items())]
    return "Findings Summary:\n" + "\n".join(lines)
