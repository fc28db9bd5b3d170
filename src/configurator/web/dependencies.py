"""FastAPI dependency injection for configurator services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from configurator.application.session import ConfiguratorSession


@lru_cache(maxsize=1)
def get_session() -> ConfiguratorSession:
    """Get the cached ConfiguratorSession shared by the session endpoints."""
    return ConfiguratorSession()


# Type aliases for cleaner endpoint signatures
SessionDep = Annotated[ConfiguratorSession, Depends(get_session)]
