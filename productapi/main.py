# productapi/main.py
import logging
from typing import Dict, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, configure_logging
from .core import ProductIn, validated_product
from .database import ProductStore
from .middleware import install_pipeline
from .models import DeletedProduct, Product, ProductPage
from .service import (
    category_stats_logic,
    create_product_logic,
    delete_product_logic,
    get_product_logic,
    list_products_logic,
    update_product_logic,
)

logger = logging.getLogger(__name__)

WELCOME = "Welcome to the Product API! Go to /api/products to see products."


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


# ---------------------------
# Product endpoints
# ---------------------------
router = APIRouter(prefix="/api/products")


@router.get("", response_model=ProductPage)
async def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProductStore = Depends(get_store),
):
    return await list_products_logic(store, category, search, page, limit)


@router.get("/stats/categories", response_model=Dict[str, int])
async def category_stats(store: ProductStore = Depends(get_store)):
    return await category_stats_logic(store)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)


@router.post("", status_code=201, response_model=Product)
async def create_product(
    payload: ProductIn = Depends(validated_product),
    store: ProductStore = Depends(get_store),
):
    return await create_product_logic(store, payload)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    payload: ProductIn = Depends(validated_product),
    store: ProductStore = Depends(get_store),
):
    return await update_product_logic(store, product_id, payload)


@router.delete("/{product_id}", response_model=DeletedProduct)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await delete_product_logic(store, product_id)


# ---------------------------
# Error bodies: always {"error": ...}
# ---------------------------
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)
    app = FastAPI(title="product-api (in-memory catalog)")
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore()

    @app.get("/", response_class=PlainTextResponse)
    async def welcome():
        return WELCOME

    app.include_router(router)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    install_pipeline(app, settings)

    # added last so it wraps the pipeline and answers preflights itself
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    return app


app = create_app()


def run() -> None:
    settings = Settings()
    server = create_app(settings)
    logger.info("Server running at http://%s:%s", settings.host, settings.port)
    uvicorn.run(server, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
