from textwrap import dedent
from typing import Optional

import pydantic
from fastapi import FastAPI
from fastapi.routing import APIRoute
from loguru import logger

from hackathon_api.errors import handle_broad_exceptions
from hackathon_api.errors import handle_pydantic_validation_errors
from hackathon_api.errors import handle_sheet_errors
from hackathon_api.exceptions import SheetError
from hackathon_api.monitoring.logger import configure_logger
from hackathon_api.monitoring.request_context import RequestContextMiddleware
from hackathon_api.routes.routes_health import ROUTER_HEALTH
from hackathon_api.routes.routes_projects import ROUTER_PROJECTS
from hackathon_api.routes.routes_registrations import ROUTER_REGISTRATIONS
from hackathon_api.settings import Settings
from hackathon_api.sheets.backend import InMemoryBackend
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.store import HackathonStore


def create_app(settings: Optional[Settings] = None, backend: Optional[TabularBackend] = None) -> FastAPI:
    """Create a FastAPI application.

    Configuration is loaded from environment variables (or a local .env file)
    via pydantic-settings. Without an explicit backend the store runs over an
    empty in-memory workbook.
    """
    settings = settings or Settings()

    configure_logger(level=settings.log_level, serialize=settings.serialize_logs)

    logger.info(
        "Configuration loaded successfully",
        service_name=settings.service_name,
        log_level=settings.log_level,
        default_hackathon_id=settings.default_hackathon_id,
    )

    app = FastAPI(
        title=settings.service_name,
        version="v1",
        description=dedent(
            """
        Project registry for a hackathon: projects, team membership, judge
        assignment and registrations, stored as rows of a spreadsheet-like
        workbook with one tab per record type.

        Every write carries the version token returned by the last read. A
        stale token is rejected with 409 and the client re-reads.
        """
        ),
        generate_unique_id_function=custom_generate_unique_id,
        swagger_ui_parameters={
            "defaultModelsExpandDepth": -1,  # Hide schemas section
            "defaultModelExpandDepth": 1,  # Keep models collapsed if shown
        },
    )
    app.state.settings = settings

    if backend is None:
        backend = InMemoryBackend()
        logger.warning("No tabular backend supplied, using an empty in-memory workbook")
    app.state.store = HackathonStore.from_backend(backend)
    logger.info("Hackathon store initialized", backend=type(backend).__name__)

    # Add request context middleware for tracking who/where requests come from
    app.add_middleware(RequestContextMiddleware)
    app.include_router(ROUTER_HEALTH, prefix="/api")
    app.include_router(ROUTER_PROJECTS, prefix="/api")
    app.include_router(ROUTER_REGISTRATIONS, prefix="/api")

    app.add_exception_handler(
        exc_class_or_status_code=pydantic.ValidationError,
        handler=handle_pydantic_validation_errors,
    )
    app.add_exception_handler(
        exc_class_or_status_code=SheetError,
        handler=handle_sheet_errors,
    )

    app.middleware("http")(handle_broad_exceptions)

    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    if route.tags:
        return f"{route.tags[0]}-{route.name}"
    return route.name
