"""
Launcher für den Student CSV Manager aus dem Quellcode-Checkout.

Start ohne pip install:
    python run.py

Nach der Installation geht auch "student-manager" oder "python -m student_manager".
Die Liste liegt immer unter ~/.student-manager/students.csv.
"""
from __future__ import annotations

import sys
from pathlib import Path

# Stelle sicher, dass "src" im sys.path ist
repo_root = Path(__file__).resolve().parent
src_path = repo_root / "src"
sys.path.insert(0, str(src_path))

from student_manager.main import main

if __name__ == "__main__":
    main()
