import sys
from pathlib import Path

# Add src to sys.path so we can import bitsproto without installing
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())
