"""Tests for feed payload normalization."""

from allocation_engine.adapters.http_feeds.normalizer import (
    clean_string,
    parse_agents,
    parse_reservation,
    parse_reservations,
    parse_stores,
)


def test_clean_string_strips():
    assert clean_string("  hello  ") == "hello"


def test_clean_string_empty():
    assert clean_string("") is None
    assert clean_string("   ") is None


def test_clean_string_none():
    assert clean_string(None) is None


def test_clean_string_number():
    assert clean_string(42) == "42"


def test_parse_reservation_full_row():
    item = parse_reservation({
        "customerName": " Hong ",
        "storeCode": "S1",
        "model": "X",
        "color": "Blue",
        "receiptTime": "2024-03-05T10:00:00",
        "reservationNumber": "R-1",
    })
    assert item.customer_name == "Hong"
    assert item.store_code == "S1"
    assert item.receipt_time == "2024-03-05T10:00:00"
    assert item.tier is None


def test_parse_reservation_requires_customer_model_color():
    assert parse_reservation({"customerName": "Hong", "model": "X"}) is None
    assert parse_reservation({"model": "X", "color": "Blue"}) is None


def test_parse_reservation_missing_store_is_empty_string():
    item = parse_reservation({"customerName": "Hong", "model": "X", "color": "Blue"})
    assert item.store_code == ""
    assert item.dedup_key == "Hong_"


def test_parse_reservations_wrapped_and_bare():
    row = {"customerName": "Hong", "model": "X", "color": "Blue"}
    assert len(parse_reservations({"data": [row, {"junk": 1}]})) == 1
    assert len(parse_reservations([row, row])) == 2
    assert parse_reservations({"success": False}) == []


def test_parse_agents_aliases():
    agents = parse_agents([
        {"contactId": "c1", "target": "Kim", "office": "Seoul", "department": "Sales 1", "storeName": "S-1"},
        {"id": "c2", "name": "Lee"},
        {"office": "Seoul"},
    ])
    assert [a.id for a in agents] == ["c1", "c2"]
    assert agents[0].store == "S-1"
    assert agents[1].office == ""


def test_parse_stores():
    assert parse_stores({"stores": [{"name": "S1"}, "bad"]}) == [{"name": "S1"}]
    assert parse_stores(None) == []
