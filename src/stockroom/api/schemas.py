"""Pydantic request/response schemas for the Stockroom API.

These are external contracts, kept separate from the Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": 7,
                    "name": "Classic Black T-Shirt",
                    "quantity_in_stock": 10,
                }
            ]
        }
    }

    product_id: int = Field(ge=1)
    name: str = Field(..., max_length=255)
    quantity_in_stock: int = Field(ge=0, default=0)


class ChangeStockRequest(BaseModel):
    quantity: int = Field(ge=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ProductIdResponse(BaseModel):
    product_id: int


class StockLevelResponse(BaseModel):
    quantity_in_stock: int
