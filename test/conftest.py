import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bignum_mul.radix import Radix  # noqa: E402  (import after sys.path tweak)

WIDTHS = [8, 16, 31, 32, 64]


@pytest.fixture(params=WIDTHS, ids=lambda w: f"W{w}")
def radix(request):
    """Each test using this runs once per digit width."""
    return Radix(request.param)
