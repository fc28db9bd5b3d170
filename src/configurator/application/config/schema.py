"""Pydantic schemas for configuration documents.

A configuration document is the serialized form of a Configuration: catalog
selections are referenced by identifier and mode dimensions by their string
value. Documents are used for configuration files, the REST API and the
``init`` CLI command.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from configurator.domain.value_objects import (
    BrakeTier,
    DrivingAssistant,
    InteriorColor,
    InteriorTrim,
    LeatherType,
    LightType,
    ModelVariant,
    PerformancePackage,
    SoundSystem,
)

# Supported schema versions for configuration documents
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

CURRENT_VERSION = "1.0"


class InteriorSchema(BaseModel):
    """Interior selections."""

    model_config = ConfigDict(extra="forbid")

    leather: LeatherType = LeatherType.MERINO
    color: InteriorColor = InteriorColor.BLACK
    trim: InteriorTrim = InteriorTrim.ALUMINUM


class ConfigurationDocument(BaseModel):
    """Root model for a configuration document.

    Every selection defaults to the shipped baseline, so a document only
    needs to list what differs from it.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        model: Model variant ("M5" or "5-series")
        performance_package: Performance package tier
        color: Paint option id
        wheels: Wheel option id
        brakes: Brake tier
        interior: Interior selections
        lights: Headlight type
        sound: Sound system tier
        driving_assistant: Driving assistant tier
        grille: Grille option id
        hood_pattern: Hood pattern option id

    Example:
        >>> doc = ConfigurationDocument(schema_version="1.0", wheels="m-y-spoke-21")
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    model: ModelVariant = ModelVariant.M5
    performance_package: PerformancePackage = PerformancePackage.PERFORMANCE
    color: str = Field(default="sapphire-black", min_length=1)
    wheels: str = Field(default="m-double-spoke-20", min_length=1)
    brakes: BrakeTier = BrakeTier.PERFORMANCE
    interior: InteriorSchema = Field(default_factory=InteriorSchema)
    lights: LightType = LightType.LASER
    sound: SoundSystem = SoundSystem.HARMAN_KARDON
    driving_assistant: DrivingAssistant = DrivingAssistant.PLUS
    grille: str = Field(default="shadow-line", min_length=1)
    hood_pattern: str = Field(default="standard", min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )


class InteriorUpdateSchema(BaseModel):
    """Partial interior update."""

    model_config = ConfigDict(extra="forbid")

    leather: LeatherType | None = None
    color: InteriorColor | None = None
    trim: InteriorTrim | None = None


class ConfigurationUpdate(BaseModel):
    """Partial configuration update. Omitted fields are left unchanged.

    Catalog selections are identifiers; an identifier the catalog does not
    declare is ignored rather than rejected, so the previous selection stays.
    """

    model_config = ConfigDict(extra="forbid")

    model: ModelVariant | None = None
    performance_package: PerformancePackage | None = None
    color: str | None = None
    wheels: str | None = None
    brakes: BrakeTier | None = None
    interior: InteriorUpdateSchema | None = None
    lights: LightType | None = None
    sound: SoundSystem | None = None
    driving_assistant: DrivingAssistant | None = None
    grille: str | None = None
    hood_pattern: str | None = None
