"""brtaxid Streamlit App (local CPF/CNPJ checker and file scanner UI)."""

from __future__ import annotations

import time
from collections import Counter
from contextlib import suppress
from pathlib import Path
from tempfile import NamedTemporaryFile

import altair as alt
import pandas as pd
import streamlit as stream

from brtaxid.detectors import Finding
from brtaxid.formatting import format_document
from brtaxid.reporting import human_summary, mask_match, to_json
from brtaxid.scanner import SUPPORTED_SUFFIXES, scan_file
from brtaxid.utils import get_logger, safe_filename
from brtaxid.validators import DocumentKind, check_document

MAX_UPLOAD_BYTES = 5 * 1024 * 1024
REPORTS_DIR = Path("data/reports")

KIND_LABELS = {
    DocumentKind.PERSON: "CPF (individual)",
    DocumentKind.ENTITY: "CNPJ (legal entity)",
    DocumentKind.OTHER: "Unknown length",
}

STATUS_COLORS = {"valid": "#2e7d32", "invalid": "#ef6c00", "rejected": "#c62828"}


@stream.cache_resource
def get_cached_logger(name: str):
    """Initializes and caches the logger."""
    return get_logger(name)


def findings_frame(findings: list[Finding]) -> pd.DataFrame:
    """Tabular view of findings with masked numbers."""
    rows = [
        {
            "Type": f.detector.upper(),
            "Number": mask_match(f.match),
            "Status": f.status,
            "Position": f.start,
            "Why": f.why,
        }
        for f in findings
    ]
    return pd.DataFrame(rows, columns=["Type", "Number", "Status", "Position", "Why"])


def status_chart(findings: list[Finding]) -> alt.Chart:
    counts = Counter((f.detector.upper(), f.status) for f in findings)
    df = pd.DataFrame(
        [{"Type": kind, "Status": status, "Count": n} for (kind, status), n in counts.items()]
    )
    return (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("Type:N", title=None),
            y=alt.Y("Count:Q", title="Documents"),
            color=alt.Color(
                "Status:N",
                scale=alt.Scale(
                    domain=list(STATUS_COLORS),
                    range=list(STATUS_COLORS.values()),
                ),
            ),
            tooltip=["Type", "Status", "Count"],
        )
    )


def render_check_tab() -> None:
    stream.subheader("Check a document")
    raw = stream.text_input("CPF or CNPJ", placeholder="000.000.000-00 or 00.000.000/0000-00")
    if not raw:
        stream.caption("Masks ('.', '-', '/') and surrounding spaces are ignored.")
        return

    result = check_document(raw)
    col_a, col_b = stream.columns(2)
    col_a.metric("Type", KIND_LABELS[result.kind])
    col_b.metric("Formatted", format_document(result.document))

    if result.rejected:
        stream.error(result.error)
    elif result.valid:
        stream.success("Check digits match.")
    else:
        stream.warning("Check digits do not match.")


def render_scan_tab(log) -> None:
    stream.subheader("Scan a file")
    uploaded_file = stream.file_uploader(
        "Drag and drop your file here",
        type=sorted(s.lstrip(".") for s in SUPPORTED_SUFFIXES),
    )
    if uploaded_file is None or not stream.button("Scan Now", type="primary"):
        return

    file_bytes = uploaded_file.getvalue()
    if len(file_bytes) > MAX_UPLOAD_BYTES:
        stream.error("File too large (>5MB).")
        return

    scan_safe_name = safe_filename(uploaded_file.name)
    start_time = time.perf_counter()
    tmp_path = None
    try:
        with NamedTemporaryFile(delete=False, suffix=Path(uploaded_file.name).suffix) as tmp:
            tmp.write(file_bytes)
            tmp_path = Path(tmp.name)
        findings, _text = scan_file(tmp_path)
    except Exception as e:
        log.exception("Scan failed")
        stream.error(f"Scan failed: {e}")
        return
    finally:
        if tmp_path:
            with suppress(OSError):
                tmp_path.unlink()
    elapsed = time.perf_counter() - start_time

    report_path = REPORTS_DIR / f"{scan_safe_name}.json"
    to_json(findings, report_path)

    stream.metric("Documents found", len(findings))
    stream.caption(f"Scanned in {elapsed:.2f}s")
    if not findings:
        stream.info("No CPF or CNPJ numbers found.")
        return

    stream.text(human_summary(findings))
    stream.altair_chart(status_chart(findings), width="stretch")
    stream.dataframe(findings_frame(findings), hide_index=True, width="stretch")
    stream.download_button(
        "⬇️ Download JSON Report",
        data=report_path.read_bytes(),
        file_name=f"{scan_safe_name}.json",
        mime="application/json",
    )


def main():
    stream.set_page_config(page_title="brtaxid - CPF/CNPJ Checker", layout="wide")
    log = get_cached_logger("brtaxid")

    stream.title("CPF / CNPJ Checker")
    stream.caption("Structural check only: a valid number is not proof of registration.")

    tab_check, tab_scan = stream.tabs(["Check 🔎", "Scan 📄"])
    with tab_check:
        render_check_tab()
    with tab_scan:
        render_scan_tab(log)


if __name__ == "__main__":
    main()
