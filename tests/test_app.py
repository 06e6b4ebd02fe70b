import pytest

from app import create_app
from config import Config
from items import add_item_for_subset
from participants import add_participant
from screens import ITEMS, ROSTER
from splitter import compute_total
from state import SplitState


@pytest.fixture
def split_state():
    return SplitState()


@pytest.fixture
def client(settings, split_state):
    flask_app = create_app(settings, split_state)
    flask_app.config["TESTING"] = True
    return flask_app.test_client()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"


def test_roster_page_hides_next_when_empty(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Add New Person" in response.data
    assert b"Next: Add Items" not in response.data


def test_add_participant_redirects_and_lists_name(client, split_state):
    response = client.post("/participants", data={"name": "  Alice "})
    assert response.status_code == 302

    page = client.get("/")
    assert b"Alice" in page.data
    assert b"Next: Add Items" in page.data
    assert [p.name for p in split_state.participants.values()] == ["Alice"]


def test_blank_participant_is_silently_rejected(client, split_state):
    response = client.post("/participants", data={"name": "   "}, follow_redirects=True)
    assert response.status_code == 200
    assert split_state.participants == {}


def test_remove_participant(client, split_state):
    alice = add_participant(split_state, "Alice")

    client.post(f"/participants/{alice.participant_id}/remove")
    client.post("/participants/999/remove")

    assert split_state.participants == {}


def test_next_is_guarded(client, split_state):
    client.post("/next")
    assert split_state.screen == ROSTER

    add_participant(split_state, "Alice")
    client.post("/next")
    assert split_state.screen == ITEMS

    client.post("/back")
    assert split_state.screen == ROSTER


def test_add_item_for_selected_people(client, split_state):
    alice = add_participant(split_state, "Alice")
    bob = add_participant(split_state, "Bob")
    client.post("/next")

    client.post("/items", data={
        "name": "Taxi",
        "price": "50",
        "shared_with": [str(alice.participant_id), str(bob.participant_id)]
    })

    page = client.get("/")
    assert b"Taxi - $25.00" in page.data
    assert compute_total(split_state, alice.participant_id) == "25.00"


def test_add_item_without_selection_is_rejected(client, split_state):
    add_participant(split_state, "Alice")
    client.post("/next")

    client.post("/items", data={"name": "Taxi", "price": "50"})
    client.post("/items", data={"name": "Taxi", "price": "", "split_all": "1"})

    assert split_state.items == {}


def test_add_item_for_everyone(client, split_state):
    people = [add_participant(split_state, name) for name in ("Alice", "Bob", "Carol")]
    client.post("/next")

    client.post("/items", data={"name": "Coffee", "price": "9", "split_all": "1"})

    assert [compute_total(split_state, p.participant_id) for p in people] == ["3.00", "3.00", "3.00"]


def test_remove_item_from_one_card(client, split_state):
    alice = add_participant(split_state, "Alice")
    bob = add_participant(split_state, "Bob")
    item = add_item_for_subset(split_state, "Taxi", 50, [alice.participant_id, bob.participant_id])
    client.post("/next")

    client.post(f"/participants/{alice.participant_id}/items/{item.item_id}/remove")

    assert compute_total(split_state, alice.participant_id) == "0.00"
    assert compute_total(split_state, bob.participant_id) == "25.00"


def test_currency_symbol_from_config(split_state):
    flask_app = create_app(Config(CURRENCY_SYMBOL="€", LOG_LEVEL="WARNING"), split_state)
    client = flask_app.test_client()
    alice = add_participant(split_state, "Alice")
    add_item_for_subset(split_state, "Book", "12.5", [alice.participant_id])
    client.post("/next")

    page = client.get("/")
    assert "Book - €12.50".encode() in page.data


def test_export_pdf(client, split_state):
    alice = add_participant(split_state, "Alice")
    add_item_for_subset(split_state, "Taxi", 50, [alice.participant_id])

    response = client.get("/export-pdf")

    assert response.status_code == 200
    assert response.headers["Content-Type"] == "application/pdf"
    assert response.data.startswith(b"%PDF")


def test_removing_everyone_from_items_view_shows_roster(client, split_state):
    alice = add_participant(split_state, "Alice")
    client.post("/next")

    client.post(f"/participants/{alice.participant_id}/remove")

    assert split_state.screen == ROSTER
    assert b"Add New Person" in client.get("/").data
