"""Mapping of stockroom failures onto HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError
from protean.integrations.fastapi import register_exception_handlers as register_protean_exception_handlers

from stockroom.exceptions import ProductNotFound, StockCommandTimeout, StockConflictError


def _error_response(status_code: int, messages) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": messages})


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(400, exc.messages)


async def _product_not_found(request: Request, exc: ProductNotFound) -> JSONResponse:
    return _error_response(404, {"product_id": [f"Product {exc.product_id} does not exist"]})


async def _stock_conflict(request: Request, exc: StockConflictError) -> JSONResponse:
    return _error_response(409, {"product_id": [f"Product {exc.product_id} was modified concurrently, retry"]})


async def _stock_command_timeout(request: Request, exc: StockCommandTimeout) -> JSONResponse:
    return _error_response(504, {"deadline": [f"Deadline exceeded during {exc.stage}"]})


def register_exception_handlers(app: FastAPI) -> None:
    """Install Protean's handlers, then the stockroom-specific ones on top."""
    register_protean_exception_handlers(app)

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(ProductNotFound, _product_not_found)
    app.add_exception_handler(StockConflictError, _stock_conflict)
    app.add_exception_handler(StockCommandTimeout, _stock_command_timeout)
