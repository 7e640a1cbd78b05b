from datetime import datetime

import pytest

from eventcapture.events import Event


def test_new_event_is_empty():
    event = Event("signup", "user_42")
    assert event.properties == {}
    assert event.timestamp is None


@pytest.mark.parametrize("name, distinct_id", [("", "user_42"), ("signup", "")])
def test_event_requires_name_and_distinct_id(name, distinct_id):
    with pytest.raises(ValueError):
        Event(name, distinct_id)


def test_insert_prop_keeps_latest_value():
    event = Event("signup", "user_42")
    event.insert_prop("plan", "free")
    event.insert_prop("plan", "pro")
    assert event.properties == {"plan": "pro"}


def test_insert_prop_many_last_pair_wins():
    event = Event("signup", "user_42")
    event.insert_prop_many([("plan", "free"), ("source", "ad"), ("plan", "pro")])
    assert event.properties == {"plan": "pro", "source": "ad"}


def test_insert_prop_many_accepts_mapping():
    event = Event("signup", "user_42")
    event.insert_prop_many({"plan": "pro", "source": "ad"})
    assert event.properties == {"plan": "pro", "source": "ad"}


def test_bulk_and_single_inserts_compose():
    event = Event("signup", "user_42")
    event.insert_prop_many([("plan", "free"), ("source", "ad")])
    event.insert_prop("plan", "pro")
    event.insert_prop_many([("source", "email")])
    assert event.properties == {"plan": "pro", "source": "email"}


def test_payload_independent_of_insertion_order():
    first = Event("signup", "user_42")
    first.insert_prop("a", "1")
    first.insert_prop("b", "2")

    second = Event("signup", "user_42")
    second.insert_prop_many([("b", "2"), ("a", "1")])

    assert first.to_payload("key") == second.to_payload("key")


def test_signup_payload():
    ts = datetime(2024, 5, 1, 12, 30, 0)
    event = Event("signup", "user_42")
    event.insert_prop("plan", "pro")
    event.set_timestamp(ts)

    assert event.to_payload("phc_test") == {
        "api_key": "phc_test",
        "event": "signup",
        "distinct_id": "user_42",
        "properties": {"plan": "pro"},
        "timestamp": "2024-05-01T12:30:00",
    }


def test_payload_omits_unset_timestamp():
    payload = Event("signup", "user_42").to_payload("phc_test")
    assert "timestamp" not in payload
