import sys
from pathlib import Path

# This repo uses a src/ layout, so when running tests without an editable
# install, we add <repo>/src to sys.path.
src_path = str(Path(__file__).resolve().parents[1] / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)
