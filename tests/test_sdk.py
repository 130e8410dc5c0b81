# tests/test_sdk.py
import httpx
import pytest
from fastapi.testclient import TestClient
from productapi.config import Settings
from productapi.database import ProductStore
from productapi.main import create_app
from sdk.pycatalog import CatalogClient

KEY = "test-key"


def make_sdk(api_key=KEY):
    app = create_app(Settings(api_key=KEY, _env_file=None), store=ProductStore())
    return CatalogClient(base_url="http://testserver", api_key=api_key, session=TestClient(app))


def test_sdk_crud_roundtrip():
    c = make_sdk()
    assert c.welcome().startswith("Welcome")

    created = c.create_product("Blender", "600W", 80, "kitchen", in_stock=False)
    assert created["inStock"] is False
    assert c.get_product(created["id"]) == created

    updated = c.update_product(created["id"], "Blender", "700W", 90, "kitchen", True)
    assert updated["description"] == "700W"

    assert c.category_stats() == {"electronics": 2, "kitchen": 2}
    assert c.delete_product(created["id"])["product"]["id"] == created["id"]


def test_sdk_list_params():
    c = make_sdk()
    page = c.list_products(category="electronics", page=2, limit=1)
    assert page["total"] == 2
    assert [p["name"] for p in page["data"]] == ["Smartphone"]
    assert c.list_products(search="coffee")["data"][0]["id"] == "3"


def test_sdk_raises_on_errors():
    c = make_sdk()
    with pytest.raises(httpx.HTTPStatusError) as exc:
        c.get_product("missing")
    assert exc.value.response.status_code == 404
    with pytest.raises(httpx.HTTPStatusError) as exc:
        make_sdk(api_key="wrong").list_products()
    assert exc.value.response.status_code == 401
