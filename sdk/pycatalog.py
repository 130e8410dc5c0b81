# sdk/pycatalog.py
import requests
import httpx
from typing import Any, Dict, Optional, Union
from rich import print

Number = Union[int, float]


class CatalogClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session: Optional[Any] = None, api_key_header: str = "x-api-key"):
        self.base_url = base_url.rstrip("/")
        # anything with a requests-style API works here (e.g. a TestClient)
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.api_key = api_key
        self.api_key_header = api_key_header
        if api_key:
            self.session.headers.update({api_key_header: api_key})

    @staticmethod
    def _product_payload(name: str, description: str, price: Number, category: str, in_stock: bool) -> Dict[str, Any]:
        return {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "inStock": in_stock,
        }

    def welcome(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        r.raise_for_status()
        return r.text

    # Products
    def list_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        params = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(f"{self.base_url}/api/products", params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, description: str, price: Number, category: str, in_stock: bool = True):
        payload = self._product_payload(name, description, price, category, in_stock)
        r = self.session.post(f"{self.base_url}/api/products", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, name: str, description: str, price: Number,
                       category: str, in_stock: bool):
        payload = self._product_payload(name, description, price, category, in_stock)
        r = self.session.put(f"{self.base_url}/api/products/{product_id}", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str):
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def category_stats(self):
        r = self.session.get(f"{self.base_url}/api/products/stats/categories", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Async create (used by the concurrency demo)
    async def create_product_async(self, name: str, description: str, price: Number, category: str,
                                   in_stock: bool = True):
        headers = {self.api_key_header: self.api_key} if self.api_key else {}
        payload = self._product_payload(name, description, price, category, in_stock)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.post(f"{self.base_url}/api/products", json=payload, headers=headers)
            # do not raise here, callers gather many of these and inspect status codes
            return r


if __name__ == "__main__":
    import argparse
    import os
    from sdk.pycatalog import CatalogClient

    parser = argparse.ArgumentParser(description="Product catalog CLI")
    parser.add_argument("--base-url", default=os.environ.get("CATALOG_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--api-key", default=os.environ.get("API_KEY"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--search", help="Match product names containing this text")
    lp.add_argument("--page", type=int, help="Page number (1-based)")
    lp.add_argument("--limit", type=int, help="Page size")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    for cmd, help_text in (("create-product", "Create a new product"), ("update-product", "Replace a product")):
        sp = subparsers.add_parser(cmd, help=help_text)
        if cmd == "update-product":
            sp.add_argument("--product-id", required=True, help="ID of the product")
        sp.add_argument("--name", required=True, help="Product name")
        sp.add_argument("--description", required=True, help="Product description")
        sp.add_argument("--price", type=float, required=True, help="Price")
        sp.add_argument("--category", required=True, help="Product category")
        sp.add_argument("--out-of-stock", action="store_true", help="Mark the product as out of stock")

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")

    subparsers.add_parser("stats", help="Count products per category")

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list-products":
        print(c.list_products(args.category, args.search, args.page, args.limit))
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "create-product":
        print(c.create_product(args.name, args.description, args.price, args.category, not args.out_of_stock))
    elif args.command == "update-product":
        print(c.update_product(args.product_id, args.name, args.description, args.price,
                               args.category, not args.out_of_stock))
    elif args.command == "delete-product":
        print(c.delete_product(args.product_id))
    elif args.command == "stats":
        print(c.category_stats())
