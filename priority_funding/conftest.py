"""Root conftest: makes `priority_funding.X` importable without installing."""
import sys
from pathlib import Path

_here = Path(__file__).resolve().parent
_parent = _here.parent

# Add repo root so `priority_funding.X` works
if str(_parent) not in sys.path:
    sys.path.insert(0, str(_parent))
