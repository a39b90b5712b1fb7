import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru():
    """The CLI installs a stderr sink bound to the captured stream; drop it afterwards."""
    yield
    logger.remove()
    logger.disable("tqcal")
