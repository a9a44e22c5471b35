import pytest


@pytest.fixture
def document():
    return {
        "personal": {"name": "Alex", "title": "Engineer", "bio": "Hi"},
        "experience": [{"title": "Dev", "subtitle": "Acme", "duration": "2020–2022"}],
        "education": [],
    }
