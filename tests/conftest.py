"""Shared fixtures for payroll schedule tests."""

from datetime import date

import pytest

from payschedule.config import OUTPUT_ENV, YEAR_ENV
from payschedule.schedule import generate

# Reference "today" so window checks do not depend on the wall clock
TODAY = date(2026, 10, 17)

EXPECTED_2024 = [
    ("January", "31/01/2024", "15/01/2024"),
    ("February", "29/02/2024", "15/02/2024"),
    ("March", "29/03/2024", "15/03/2024"),
    ("April", "30/04/2024", "15/04/2024"),
    ("May", "31/05/2024", "15/05/2024"),
    ("June", "28/06/2024", "19/06/2024"),
    ("July", "31/07/2024", "15/07/2024"),
    ("August", "30/08/2024", "15/08/2024"),
    ("September", "30/09/2024", "18/09/2024"),
    ("October", "31/10/2024", "15/10/2024"),
    ("November", "29/11/2024", "15/11/2024"),
    ("December", "31/12/2024", "18/12/2024"),
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(OUTPUT_ENV, raising=False)
    monkeypatch.delenv(YEAR_ENV, raising=False)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def schedule_2024():
    return generate(2024)


@pytest.fixture
def expected_2024():
    return list(EXPECTED_2024)
