import pytest

from app.core.exceptions import InvalidReference, NotFound
from app.core.ids import is_valid_id, new_id
from app.modules.user_management.services.user import resolve_author

API = "/api/v1"


def test_new_ids_are_valid():
    assert is_valid_id(new_id())


@pytest.mark.parametrize("value", ["", "abc", "1234", None, 42, "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"])
def test_malformed_ids_are_rejected(value):
    assert not is_valid_id(value)


def test_resolve_author_returns_user(db, make_user):
    user = make_user(first_name="Ada")
    assert resolve_author(db, user.id).first_name == "Ada"


def test_resolve_author_malformed_id(db):
    with pytest.raises(InvalidReference):
        resolve_author(db, "not-an-id")


def test_resolve_author_unknown_user(db):
    with pytest.raises(NotFound):
        resolve_author(db, new_id())


def test_register_and_fetch_user(client):
    response = client.post(
        f"{API}/users",
        json={"firstName": "Grace", "lastName": "Hopper", "email": "grace@example.com", "location": "NYC"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["firstName"] == "Grace"
    assert body["location"] == "NYC"

    fetched = client.get(f"{API}/users/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "grace@example.com"

    listed = client.get(f"{API}/users")
    assert [u["id"] for u in listed.json()] == [body["id"]]


def test_register_duplicate_email(client):
    payload = {"firstName": "A", "lastName": "B", "email": "dup@example.com"}
    assert client.post(f"{API}/users", json=payload).status_code == 201
    response = client.post(f"{API}/users", json=payload)
    assert response.status_code == 400


def test_get_user_errors(client):
    assert client.get(f"{API}/users/bogus").status_code == 400
    response = client.get(f"{API}/users/{new_id()}")
    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_store_errors_become_store_fault(db, make_user):
    from app.core.exceptions import StoreFault
    from app.modules.user_management.schemas.user import UserCreate
    from app.modules.user_management.services.user import create_user, get_users

    make_user(email="taken@example.com")
    with pytest.raises(StoreFault):
        create_user(db, UserCreate(first_name="A", last_name="B", email="taken@example.com"))
    assert len(get_users(db)) == 1
