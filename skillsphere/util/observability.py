"""Logfire setup.

Services, the invitation engine and the change feed call ``logfire`` directly
(``logfire.span``/``logfire.info``); this module only configures the SDK and
hooks FastAPI and SQLAlchemy into it.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from skillsphere.config import ObservabilitySettings, Settings

SERVICE_NAME = "skillsphere-api"

# Probed every few seconds by the platform; not worth a trace each
_UNTRACED_PATHS = "/health"


def _should_send(observability: ObservabilitySettings) -> bool:
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire.

    Console output is always on. Export to Logfire cloud follows
    ``OBSERVABILITY__SEND_TO_LOGFIRE``, defaulting to "only if a token is set".
    """
    observability = settings.observability
    send_to_logfire = _should_send(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        uniqueness_scope=settings.invitations.uniqueness_scope.value,
    )


def _request_attributes(request, attributes):
    # Surface the invitation being answered so respond spans are searchable
    invitation_id = request.path_params.get("invitation_id")
    if invitation_id is not None:
        return {**attributes, "invitation_id": str(invitation_id)}
    return attributes


def instrument_fastapi(app: FastAPI) -> None:
    """Trace API requests, without headers (they carry bearer tokens)."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=_UNTRACED_PATHS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace repository queries on ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
