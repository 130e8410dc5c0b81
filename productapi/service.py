from typing import Any, Dict, Optional

from fastapi import HTTPException

from .core import ProductIn
from .database import ProductStore

# This file contains the core logic for all product endpoints.

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _as_int(raw: Optional[str], default: int) -> Optional[int]:
    # No bounds checks: unparseable values become None and page to nothing
    if raw is None:
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


async def list_products_logic(
    store: ProductStore,
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    result = store.snapshot()

    if category:
        wanted = category.lower()
        result = [p for p in result if p["category"].lower() == wanted]

    if search:
        term = search.lower()
        result = [p for p in result if term in p["name"].lower()]

    page_no = _as_int(page, DEFAULT_PAGE)
    page_size = _as_int(limit, DEFAULT_LIMIT)
    if page_no is None or page_size is None:
        paginated = []
    else:
        start = (page_no - 1) * page_size
        paginated = result[start:start + page_size]

    return {
        "total": len(result),
        "page": page_no,
        "limit": page_size,
        "data": paginated,
    }


async def get_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    p = store.get(product_id)
    if p is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return p


async def create_product_logic(store: ProductStore, payload: ProductIn) -> Dict[str, Any]:
    return store.add(payload)


async def update_product_logic(store: ProductStore, product_id: str, payload: ProductIn) -> Dict[str, Any]:
    p = store.replace(product_id, payload)
    if p is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return p


async def delete_product_logic(store: ProductStore, product_id: str) -> Dict[str, Any]:
    p = store.remove(product_id)
    if p is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"message": "Product deleted", "product": p}


async def category_stats_logic(store: ProductStore) -> Dict[str, int]:
    return store.category_counts()
