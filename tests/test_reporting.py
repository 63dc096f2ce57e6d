from pathlib import Path

from brtaxid.detectors import Finding
from brtaxid.reporting import human_summary, mask_match, to_json


def _sample_finding() -> Finding:
    return Finding(
        detector="cpf",
        match="529.982.247-25",
        start=4,
        end=18,
        status="valid",
        why="Verified: CPF check digits match.",
    )


def test_to_json_schema(tmp_path: Path) -> None:
    """Ensure the JSON report includes expected keys and formatting."""
    out_path = tmp_path / "reports" / "report.json"

    to_json([_sample_finding()], out_path)

    report_text = out_path.read_text(encoding="utf-8")
    assert '"detector": "cpf"' in report_text
    assert '"match": "529.982.247-25"' in report_text
    assert '"status": "valid"' in report_text


def test_to_json_as_string(tmp_path: Path) -> None:
    out_path = tmp_path / "unused.json"
    text = to_json([], out_path, return_as_string=True)
    assert text == "[]"
    assert not out_path.exists()


def test_human_summary_privacy() -> None:
    """human_summary should not leak raw document numbers."""
    summary = human_summary([_sample_finding()])

    assert "cpf (valid): 1" in summary
    assert "529.982.247-25" not in summary


def test_human_summary_empty() -> None:
    assert "No documents detected" in human_summary([])


def test_mask_match_keeps_check_digits() -> None:
    assert mask_match("529.982.247-25") == "***.***.***-25"
    assert mask_match("11444777000161") == "************61"
