# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment
#   • src/ on sys.path so the package imports without installation
#   • CLI audit records disabled unless a test turns them on

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))  # чтобы import видел src/

os.environ.setdefault("SHAMIR_AUDIT", "0")
