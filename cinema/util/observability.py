"""Logfire setup for the API process and maintenance scripts.

Domain code emits spans and events directly::

    with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
        ...
    logfire.info("Comment created", comment_id=str(comment.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from cinema.config import Settings

SERVICE_NAME = "cinema-api"
SERVICE_VERSION = "0.1.0"

# Health checks hit these every few seconds; tracing them only adds noise.
UNTRACED_URLS = ["/health"]


def _send_to_logfire(settings: Settings) -> bool:
    """An explicit setting wins, otherwise send only when a token is set."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current process.

    Args:
        settings: Application settings
    """
    send = _send_to_logfire(settings)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def _request_attributes(request, attributes):
    result = {**attributes}
    # Comment routes carry the movie and comment ids in the path.
    if hasattr(request, "path_params"):
        for key in ("movie_id", "comment_id"):
            if key in request.path_params:
                result[key] = str(request.path_params[key])
    if getattr(request, "client", None):
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=",".join(UNTRACED_URLS),
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries on the async engine, tagging SQL with span context."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
