"""Configuration document endpoints."""

from fastapi import APIRouter

from configurator.application.config import (
    ConfigurationDocument,
    configuration_to_document,
)
from configurator.domain.entities import default_configuration

router = APIRouter(prefix="/configuration", tags=["configuration"])


@router.get("/default", response_model=ConfigurationDocument)
async def get_default_configuration() -> ConfigurationDocument:
    """Get the shipped baseline configuration as a document."""
    return configuration_to_document(default_configuration())
