import pytest

from numcalc import settings
from numcalc.status import clear_status


@pytest.fixture(autouse=True)
def fresh_state():
    """Default step/bins and an OK status mirror for every test."""
    settings.reset()
    clear_status()
    yield
    settings.reset()
