from typing import Any, Dict, List, Union

from fastapi import HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Text fields treat any falsy value (missing, null, "") as missing.
TEXT_FIELDS = ("name", "description", "category")
# Value fields only treat missing/null as missing, so 0 and false are kept.
VALUE_FIELDS = ("price", "inStock")


class ProductIn(BaseModel):
    # strict: "800", 1 or "no" are rejected rather than coerced
    model_config = ConfigDict(populate_by_name=True, strict=True)

    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(alias="inStock")


def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": p.name,
        "description": p.description,
        "price": p.price,
        "category": p.category,
        "inStock": p.in_stock,
    }


def missing_fields(body: Dict[str, Any]) -> List[str]:
    missing = [f for f in TEXT_FIELDS if not body.get(f)]
    missing += [f for f in VALUE_FIELDS if body.get(f) is None]
    return missing


async def validated_product(request: Request) -> ProductIn:
    """Presence check for create/update bodies, run before the handler."""
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict) or missing_fields(body):
        raise HTTPException(status_code=400, detail="Validation error: Missing required fields")
    try:
        return ProductIn.model_validate(body)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Validation error: Invalid field types")
