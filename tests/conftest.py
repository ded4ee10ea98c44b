import pytest

from scilib.core.config.settings import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from the default global configuration."""
    reset_config()
    yield
    reset_config()
