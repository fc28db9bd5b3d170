"""Configurator session endpoints.

The session is process-wide: every client shares the one cached
ConfiguratorSession from ``get_session``.
"""

import dataclasses

from fastapi import APIRouter

from configurator.application.config import (
    ConfigurationUpdate,
    configuration_to_document,
)
from configurator.application.session import ConfiguratorSession
from configurator.web.dependencies import SessionDep
from configurator.web.routers.validate import result_to_schema
from configurator.web.schemas.requests import FunctionCallsRequest
from configurator.web.schemas.responses import (
    FunctionCallsResultSchema,
    SessionStateSchema,
)

router = APIRouter(prefix="/session", tags=["session"])


def _state(session: ConfiguratorSession) -> SessionStateSchema:
    return SessionStateSchema(
        configuration=configuration_to_document(session.configuration),
        option_price=session.configuration.option_price,
        validation=result_to_schema(session.validation),
    )


@router.get("", response_model=SessionStateSchema)
async def get_session_state(session: SessionDep) -> SessionStateSchema:
    """Get the current configuration and its validation."""
    return _state(session)


@router.post("/updates", response_model=SessionStateSchema)
async def apply_updates(
    update: ConfigurationUpdate,
    session: SessionDep,
) -> SessionStateSchema:
    """Apply a partial update. Unknown option ids keep the current selection."""
    session.apply_update(update)
    return _state(session)


@router.post("/function-calls", response_model=FunctionCallsResultSchema)
async def apply_function_calls(
    request: FunctionCallsRequest,
    session: SessionDep,
) -> FunctionCallsResultSchema:
    """Apply assistant function calls, then structured changes."""
    before = session.configuration
    outcome = session.apply_function_calls(request.calls)
    if request.changes:
        session.apply_config_changes(request.changes)

    after = session.configuration
    updated = [
        field.name
        for field in dataclasses.fields(before)
        if getattr(before, field.name) != getattr(after, field.name)
    ]
    return FunctionCallsResultSchema(
        updated_fields=updated,
        show_validation=outcome.show_validation,
        session=_state(session),
    )


@router.post("/reset", response_model=SessionStateSchema)
async def reset_session(session: SessionDep) -> SessionStateSchema:
    """Reset the session to the shipped baseline."""
    session.reset()
    return _state(session)
