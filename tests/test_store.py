# tests/test_store.py
from productapi.core import ProductIn, missing_fields
from productapi.database import SEED_PRODUCTS, ProductStore


def payload(**overrides):
    data = {"name": "Desk", "description": "Oak", "price": 300, "category": "furniture", "inStock": True}
    data.update(overrides)
    return ProductIn.model_validate(data)


def test_fresh_store_is_seeded_and_independent():
    a, b = ProductStore(), ProductStore()
    a.remove("1")
    assert b.ids() == ["1", "2", "3"]
    # the seed itself is never mutated
    assert [p["id"] for p in SEED_PRODUCTS] == ["1", "2", "3"]


def test_returned_records_are_copies():
    store = ProductStore()
    p = store.get("1")
    p["name"] = "changed"
    store.snapshot()[0]["price"] = 0
    assert store.get("1")["name"] == "Laptop"
    assert store.get("1")["price"] == 1200


def test_replace_keeps_id_and_position():
    store = ProductStore()
    updated = store.replace("2", payload(name="Monitor"))
    assert updated["id"] == "2"
    assert updated["name"] == "Monitor"
    assert store.ids() == ["1", "2", "3"]
    assert store.replace("nope", payload()) is None


def test_remove_returns_snapshot():
    store = ProductStore()
    removed = store.remove("3")
    assert removed["name"] == "Coffee Maker"
    assert store.ids() == ["1", "2"]
    assert store.remove("3") is None


def test_category_counts_keep_original_casing():
    store = ProductStore()
    store.add(payload(category="Electronics"))
    assert store.category_counts() == {"electronics": 2, "kitchen": 1, "Electronics": 1}


def test_missing_fields_rules():
    full = {"name": "a", "description": "b", "price": 0, "category": "c", "inStock": False}
    assert missing_fields(full) == []
    assert missing_fields({**full, "name": ""}) == ["name"]
    assert missing_fields({**full, "category": None}) == ["category"]
    assert missing_fields({**full, "price": None, "inStock": None}) == ["price", "inStock"]
    assert missing_fields({}) == ["name", "description", "category", "price", "inStock"]
