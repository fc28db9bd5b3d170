"""Option catalog endpoints."""

from fastapi import APIRouter

from configurator.domain.catalog import list_modes, list_options
from configurator.domain.value_objects import Dimension
from configurator.web.exceptions import UnknownDimensionError
from configurator.web.schemas.responses import (
    DimensionOptionsSchema,
    OptionsListSchema,
    OptionValueSchema,
)

router = APIRouter(prefix="/options", tags=["options"])


def _dimension_schema(dimension: Dimension) -> DimensionOptionsSchema:
    if dimension.is_catalog:
        return DimensionOptionsSchema(
            dimension=dimension.value,
            kind="catalog",
            options=[
                OptionValueSchema(
                    id=o.id,
                    name=o.name,
                    classification=getattr(o.classification, "value", o.classification),
                    price=o.price,
                )
                for o in list_options(dimension)
            ],
        )
    return DimensionOptionsSchema(
        dimension=dimension.value,
        kind="mode",
        options=[OptionValueSchema(id=m.value, name=m.label) for m in list_modes(dimension)],
    )


@router.get("", response_model=OptionsListSchema)
async def list_dimensions() -> OptionsListSchema:
    """List the selectable values of every dimension."""
    return OptionsListSchema(dimensions=[_dimension_schema(d) for d in Dimension])


@router.get("/{dimension}", response_model=DimensionOptionsSchema)
async def get_dimension(dimension: str) -> DimensionOptionsSchema:
    """List the selectable values of one dimension.

    Raises:
        UnknownDimensionError: If the dimension does not exist (handled by
            exception handler).
    """
    try:
        selected = Dimension(dimension)
    except ValueError:
        raise UnknownDimensionError(dimension, [d.value for d in Dimension])
    return _dimension_schema(selected)
