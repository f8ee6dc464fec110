"""Stockroom FastAPI application.

Processes stock commands synchronously via HTTP. Every request under
``/products`` runs inside the stockroom domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the configuration overlay from stockroom/domain.toml.
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from stockroom.domain import stockroom

stockroom.init()

from stockroom.api import product_router, register_exception_handlers  # noqa: E402

app = FastAPI(
    title="Stockroom API",
    description="Product stock levels, one command per endpoint",
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the stockroom domain context for product routes."""
    if request.url.path.startswith("/products"):
        with stockroom.domain_context():
            return await call_next(request)
    # Health check, docs, etc.
    return await call_next(request)


app.include_router(product_router)
register_exception_handlers(app)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": stockroom.name})
