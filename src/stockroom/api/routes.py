"""FastAPI routes for the Stockroom domain."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from stockroom.api.schemas import (
    ChangeStockRequest,
    ProductIdResponse,
    RegisterProductRequest,
    StockLevelResponse,
)
from stockroom.product.registration import RegisterProduct
from stockroom.shared.deadline import deadline_from_now
from stockroom.stock.add_stocks import AddStocks
from stockroom.stock.projection import get_stock_level
from stockroom.stock.remove_stocks import RemoveStocks

product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def register_product(body: RegisterProductRequest) -> ProductIdResponse:
    command = RegisterProduct(
        product_id=body.product_id,
        name=body.name,
        quantity_in_stock=body.quantity_in_stock,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("/{product_id}/stock", response_model=StockLevelResponse)
async def read_stock_level(product_id: int) -> StockLevelResponse:
    level = get_stock_level(product_id)
    return StockLevelResponse(quantity_in_stock=level.quantity_in_stock)


@product_router.put("/{product_id}/stock/add", response_model=StockLevelResponse)
async def add_stocks(product_id: int, body: ChangeStockRequest) -> StockLevelResponse:
    command = AddStocks(
        product_id=product_id,
        quantity=body.quantity,
        deadline=deadline_from_now(),
    )
    level = current_domain.process(command, asynchronous=False)
    return StockLevelResponse(quantity_in_stock=level.quantity_in_stock)


@product_router.put("/{product_id}/stock/remove", response_model=StockLevelResponse)
async def remove_stocks(product_id: int, body: ChangeStockRequest) -> StockLevelResponse:
    command = RemoveStocks(
        product_id=product_id,
        quantity=body.quantity,
        deadline=deadline_from_now(),
    )
    level = current_domain.process(command, asynchronous=False)
    return StockLevelResponse(quantity_in_stock=level.quantity_in_stock)
