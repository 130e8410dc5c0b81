import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional

from .core import ProductIn, _make_product_dict

# This file holds the in-memory product store and the lock guarding it.

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {"id": "1", "name": "Laptop", "description": "16GB RAM", "price": 1200, "category": "electronics", "inStock": True},
    {"id": "2", "name": "Smartphone", "description": "128GB storage", "price": 800, "category": "electronics", "inStock": True},
    {"id": "3", "name": "Coffee Maker", "description": "Programmable", "price": 50, "category": "kitchen", "inStock": False},
]


class ProductStore:
    """Ordered, process-lifetime collection of product records.

    Every read/find/mutate sequence runs under one lock, and records leave
    the store as copies so nothing outside can mutate them unguarded.
    """

    def __init__(self, products: Optional[Iterable[Dict[str, Any]]] = None):
        seed = SEED_PRODUCTS if products is None else products
        self._products: List[Dict[str, Any]] = [dict(p) for p in seed]
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def snapshot(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(p) for p in self._products]

    def ids(self) -> List[str]:
        with self._lock:
            return [p["id"] for p in self._products]

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p["id"] == product_id:
                return i
        return -1

    def get(self, product_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            i = self._index_of(product_id)
            return dict(self._products[i]) if i != -1 else None

    def add(self, payload: ProductIn) -> Dict[str, Any]:
        with self._lock:
            taken = {p["id"] for p in self._products}
            pid = str(uuid.uuid4())
            while pid in taken:
                pid = str(uuid.uuid4())
            product = _make_product_dict(pid, payload)
            self._products.append(product)
            return dict(product)

    def replace(self, product_id: str, payload: ProductIn) -> Optional[Dict[str, Any]]:
        with self._lock:
            i = self._index_of(product_id)
            if i == -1:
                return None
            # update in place; id is never taken from the payload
            self._products[i].update(_make_product_dict(product_id, payload))
            return dict(self._products[i])

    def remove(self, product_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            i = self._index_of(product_id)
            if i == -1:
                return None
            return self._products.pop(i)

    def category_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        with self._lock:
            for p in self._products:
                counts[p["category"]] = counts.get(p["category"], 0) + 1
        return counts
