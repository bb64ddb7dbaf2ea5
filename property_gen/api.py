"""HTTP API for synthetic listings.

    GET /api/scrape-v2?city=Orlando&limit=50
    GET /api/scrape-v2?all=true&limit=10&format=csv

Run with ``property-gen-api`` or
``uvicorn property_gen.api:create_app --factory``.
"""

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.datastructures import Headers

from property_gen import __version__
from property_gen.config import PropertyGenConfig
from property_gen.exceptions import MethodNotAllowedError, UsageError
from property_gen.export import ExportAdapter, ExportRequest
from property_gen.generators import PropertyGenerator
from property_gen.logging import get_logger, setup_logging

logger = get_logger(__name__)

ALLOWED_METHODS = ["GET", "OPTIONS"]

router = APIRouter(tags=["listings"])


class PreflightCORSMiddleware(CORSMiddleware):
    """CORS middleware whose preflight answer is always an empty 200.

    Requested headers are echoed back, and an origin outside
    ``allow_origins`` simply gets no ``Access-Control-Allow-Origin``.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        origin = request_headers["origin"]
        if self.preflight_explicit_allow_origin and self.is_allowed_origin(origin=origin):
            headers["Access-Control-Allow-Origin"] = origin

        requested_headers = request_headers.get("access-control-request-headers")
        if requested_headers:
            headers["Access-Control-Allow-Headers"] = requested_headers

        return Response(status_code=200, headers=headers)


def get_adapter(request: Request) -> ExportAdapter:
    return request.app.state.adapter


def get_config(request: Request) -> PropertyGenConfig:
    return request.app.state.config


@router.get("/scrape-v2")
async def scrape(
    city: str | None = Query(default=None, description="City name"),
    all_: str | None = Query(default=None, alias="all", description='"true" for every roster city'),
    limit: str | None = Query(default=None, description="Listings per city"),
    format_: str | None = Query(default=None, alias="format", description="json or csv"),
    adapter: ExportAdapter = Depends(get_adapter),
    config: PropertyGenConfig = Depends(get_config),
) -> Response:
    """Generate listings for one city or the whole roster."""
    export_request = ExportRequest.from_query(
        city=city,
        all_=all_,
        limit=limit,
        format_=format_,
        config=config.api,
    )

    try:
        result = adapter.export(export_request)
    except UsageError:
        raise
    except Exception as exc:
        logger.exception("Export failed for %s", export_request.label)
        return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})

    return Response(content=result.body, media_type=result.media_type, headers=result.headers)


@router.options("/scrape-v2")
async def scrape_options() -> Response:
    return Response(status_code=200)


@router.api_route(
    "/scrape-v2",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def scrape_method_not_allowed(request: Request) -> Response:
    raise MethodNotAllowedError(f"Method {request.method} not allowed")


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": __version__}


async def usage_error_handler(request: Request, exc: UsageError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content=exc.to_dict())


async def method_not_allowed_handler(
    request: Request, exc: MethodNotAllowedError
) -> JSONResponse:
    return JSONResponse(
        status_code=405,
        content={"success": False, "error": "Method not allowed"},
        headers={"Allow": ", ".join(ALLOWED_METHODS)},
    )


def create_app(
    config: PropertyGenConfig | None = None,
    generator: PropertyGenerator | None = None,
) -> FastAPI:
    """Build the API application.

    Parameters
    ----------
    config : PropertyGenConfig | None
        Application config. Defaults to ``PropertyGenConfig.from_env()``.
    generator : PropertyGenerator | None
        Listing source shared by all requests. Defaults to a generator
        seeded with ``config.seed``.

    Returns
    -------
    FastAPI
        Configured application.
    """
    config = config or PropertyGenConfig.from_env()
    generator = generator or PropertyGenerator(seed=config.seed)

    app = FastAPI(
        title="property-gen",
        version=__version__,
        description="Synthetic Central Florida property listings",
    )
    app.state.config = config
    app.state.adapter = ExportAdapter(generator, cities=config.cities)

    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=config.api.allow_origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(UsageError, usage_error_handler)
    app.add_exception_handler(MethodNotAllowedError, method_not_allowed_handler)
    app.include_router(router, prefix="/api")

    logger.info(
        "API ready (default limit %d, max limit %d)",
        config.api.default_limit,
        config.api.max_limit,
    )
    return app


def main() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    config = PropertyGenConfig.from_env()
    setup_logging(level=config.log_level, format_type=config.log_format)
    uvicorn.run(
        create_app(config),
        host=config.api.host,
        port=config.api.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
