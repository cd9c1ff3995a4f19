import dotenv
import pytest

from minimarkup import MarkupConfig, MiniMarkup


def pytest_configure(config):
    dotenv.load_dotenv(".env")


@pytest.fixture
def mm() -> MiniMarkup:
    return MiniMarkup(config=MarkupConfig())
