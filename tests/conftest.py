import pytest

from app import create_app
from api.services.font_tables import FontTable, get_font_table
from config import TestConfig


class NoRaReorderConfig(TestConfig):
    REORDER_RA_SUBJOIN = False


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def no_ra_client():
    return create_app(NoRaReorderConfig).test_client()


@pytest.fixture
def ml_table():
    return get_font_table('ml')


@pytest.fixture
def fml_table():
    return get_font_table('fml')


@pytest.fixture
def toy_table():
    return FontTable('toy', 'toy', {'a': '1', 'ab': '2', 'abc': '3', 'x': '[x]'})
