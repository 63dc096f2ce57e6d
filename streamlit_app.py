"""
Wrapper file for Streamlit Cloud deployment.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add /src to PATH so Streamlit Cloud can import brtaxid/* without an install.
ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from brtaxid import app_streamlit as _app  # noqa: E402

_app.main()
