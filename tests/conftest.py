import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

_ROOT_DIR = Path(__file__).resolve().parents[1]
if str(_ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(_ROOT_DIR))

from usersearch.main import create_app  # noqa: E402
from usersearch.services.search_client import SearchClient  # noqa: E402
from usersearch.store.records import RecordStore, UserRecord  # noqa: E402

SEARCH_URL = "http://testserver/search/users"


def make_record(id, first_name, last_name, age=30, gender="female", about=""):
    return UserRecord(
        id=id,
        first_name=first_name,
        last_name=last_name,
        age=age,
        gender=gender,
        about=about,
        email=f"{first_name.lower()}@example.com",
    )


@pytest.fixture()
def records():
    return [
        make_record(3, "Hilda", "Mayer", age=21, about="Sit commodo consectetur."),
        make_record(1, "Boyd", "Wolf", age=22, gender="male"),
        make_record(7, "Glenn", "Jordan", age=25, gender="male"),
        make_record(2, "Hilda", "Abbott", age=21),
        make_record(5, "Brooks", "Aguilar", age=30, gender="male", about="Velit ullamco Hilda est."),
        make_record(4, "Beulah", "Stark", age=30),
        make_record(6, "Owen", "Lynch", age=22, gender="male"),
    ]


@pytest.fixture()
def store(records):
    return RecordStore(records)


@pytest.fixture()
def app(store):
    return create_app(store)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def search_client(client):
    return SearchClient(url=SEARCH_URL, access_token="token", http_client=client)
