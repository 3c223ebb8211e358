"""FastAPI application factory for the Supply API.

The application owns an explicit ``ApiContext`` (domain handle plus its
own metrics registry); nothing request-related lives at module level.
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST
from protean.domain import Domain

from supply.api.errors import register_error_handlers
from supply.api.instrumentation import ApiContext, SupplyMetrics
from supply.api.routes import product_router, supplier_router
from supply.utils.logging import add_context, clear_context

TRACE_HEADER = "X-Trace-Id"


def create_app(domain: Domain, metrics: SupplyMetrics | None = None) -> FastAPI:
    """Build the API around an initialized domain."""
    app = FastAPI(
        title="OctoCAT Supply API",
        description="Suppliers and products for the OctoCAT storefront",
    )
    app.state.context = ApiContext(domain=domain, metrics=metrics or SupplyMetrics())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind a trace id for logging and push the domain context for each request."""
        trace_id = request.headers.get(TRACE_HEADER) or uuid.uuid4().hex
        clear_context()
        add_context(trace_id=trace_id, method=request.method, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        response.headers[TRACE_HEADER] = trace_id
        return response

    register_error_handlers(app)

    app.include_router(supplier_router)
    app.include_router(product_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": domain.name})

    @app.get("/metrics")
    async def metrics_endpoint(request: Request):
        return Response(content=request.app.state.context.metrics.render(), media_type=CONTENT_TYPE_LATEST)

    return app
