# ============================================
# catalog/main.py — Product Catalog FastAPI App
# ============================================
# HTTP surface of the product service:
#   - /api/products CRUD, JSON bodies throughout
#   - /health and /metrics platform endpoints
#   - every error rendered as {"message": ...}

import logging
import time
from typing import Any, Optional

from fastapi import Body, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, get_settings
from .database import Database
from .errors import CatalogError, StorageError, ValidationError
from .service import Authorizer, ProductService
from .store import ProductStore

logger = logging.getLogger(__name__)

# ── Prometheus Metrics ────────────────────────────────────────
REQUEST_COUNT = Counter(
    'catalog_http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)
REQUEST_LATENCY = Histogram(
    'catalog_request_latency_seconds',
    'Request latency in seconds',
    ['endpoint']
)


# ── Dependencies ──────────────────────────────────────────────
def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


async def json_object_body(payload: Any = Body(None)) -> dict:
    """Accept any JSON object; field checks belong to ProductService."""
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


# ── Exception Handlers ────────────────────────────────────────
def register_exception_handlers(app: FastAPI, settings: Settings) -> None:

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        content = exc.to_dict()
        if isinstance(exc, StorageError):
            logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.detail)
            content["error"] = "Internal Server Error" if settings.is_production else (exc.detail or exc.message)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return JSONResponse(status_code=404, content={"message": "Route not found"})
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Only reachable for bodies that are not valid JSON.
        return JSONResponse(status_code=400, content={"message": "Malformed request body"})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        if not settings.is_production:
            logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "message": "Something went wrong on the server",
                "error": str(exc) if settings.is_development else "Internal Server Error",
            },
        )


# ── App Factory ───────────────────────────────────────────────
def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProductStore] = None,
    authorizer: Optional[Authorizer] = None,
) -> FastAPI:
    """Build the service. Without an explicit ``store`` the app connects to MongoDB on startup."""
    settings = settings or get_settings()

    app = FastAPI(
        title="product-catalog",
        description="Product catalogue service — FastAPI + MongoDB",
        version="1.0.0",
        # Disable Swagger UI in production
        docs_url="/docs" if not settings.is_production else None,
    )
    app.state.settings = settings
    app.state.database = None

    if store is not None:
        app.state.product_service = ProductService(store, authorizer)
    else:
        database = Database(settings)
        app.state.database = database

        # ── Lifecycle Events ──────────────────────────────────
        @app.on_event("startup")
        async def startup():
            try:
                await database.connect()
            except StorageError as exc:
                logger.error("MongoDB connection failed: %s", exc.detail)
                raise SystemExit(1) from exc
            app.state.product_service = ProductService(database.product_store(), authorizer)

        @app.on_event("shutdown")
        async def shutdown():
            await database.close()

    register_exception_handlers(app, settings)

    # The storefront is served from a different origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = time.time() - start
        REQUEST_COUNT.labels(request.method, request.url.path, response.status_code).inc()
        REQUEST_LATENCY.labels(request.url.path).observe(duration)
        return response

    # ── Platform Endpoints ────────────────────────────────────
    @app.get("/", tags=["platform"])
    async def root():
        return {"message": "Product Catalog API is running"}

    @app.get("/health", tags=["platform"])
    async def health():
        """Readiness probe. Pings MongoDB when the app owns a connection."""
        database = app.state.database
        if database is None:
            return {"status": "ok", "service": "product-catalog", "db": "n/a"}
        try:
            await database.ping()
            return {"status": "ok", "service": "product-catalog", "db": "connected"}
        except Exception as e:
            return JSONResponse(
                status_code=503,
                content={"status": "error", "service": "product-catalog", "db": str(e)}
            )

    @app.get("/metrics", tags=["platform"])
    async def metrics():
        """Prometheus scrape endpoint."""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # ── CRUD Endpoints ────────────────────────────────────────
    @app.get("/api/products", tags=["products"])
    async def list_products(service: ProductService = Depends(get_product_service)):
        """All products, unfiltered and unpaginated."""
        return [p.to_response() for p in await service.list()]

    @app.get("/api/products/{product_id}", tags=["products"])
    async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
        product = await service.get(product_id)
        return product.to_response()

    @app.post("/api/products", status_code=201, tags=["products"])
    async def create_product(
        payload: dict = Depends(json_object_body),
        service: ProductService = Depends(get_product_service),
    ):
        product = await service.create(payload)
        return product.to_response()

    @app.put("/api/products/{product_id}", tags=["products"])
    async def update_product(
        product_id: str,
        payload: dict = Depends(json_object_body),
        service: ProductService = Depends(get_product_service),
    ):
        """Full overwrite — every editable field must be supplied."""
        product = await service.update(product_id, payload)
        return product.to_response()

    @app.delete("/api/products/{product_id}", tags=["products"])
    async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
        return await service.delete(product_id)

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
