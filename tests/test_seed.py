import pytest
from directory_api.config import SETTINGS
from directory_api.utils.seed import _read_rows, seed_store

def test_seed_skips_populated_store(db_session):
    # The session fixture already seeded the store at startup
    assert seed_store(db_session, SETTINGS) == {"departments": 0, "employees": 0}

def test_seed_disabled(db_session):
    settings = {**SETTINGS, "seed": {**SETTINGS["seed"], "enabled": False}}
    assert seed_store(db_session, settings) == {"departments": 0, "employees": 0}

def test_read_rows_normalizes_headers():
    rows = _read_rows("\ufeffName \nEngineering\n Sales \n", "departments")
    assert rows == [{"name": "Engineering"}, {"name": "Sales"}]

def test_read_rows_requires_expected_headers():
    with pytest.raises(ValueError):
        _read_rows("first_name,last_name\nAna,Ruiz\n", "employees")
