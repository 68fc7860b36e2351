"""Pytest configuration for calperiod tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Put the project root on sys.path so calperiod imports from the checkout
# when the package is not installed
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
