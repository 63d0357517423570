import pytest

from fixedstep.config import reset_config


@pytest.fixture(autouse=True)
def _default_config():
    """Every test starts and ends with the default configuration."""
    reset_config()
    yield
    reset_config()
