"""Violation predicates, one per rule.

Each function returns True when the configuration is in the problem state
the rule describes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from configurator.domain.value_objects import (
    BrakeTier,
    ColorFinish,
    DrivingAssistant,
    InteriorTrim,
    LeatherType,
    LightType,
    ModelVariant,
    PerformancePackage,
    SoundSystem,
)

if TYPE_CHECKING:
    from configurator.domain.entities import Configuration

EXCLUSIVE_FINISHES: frozenset[ColorFinish] = frozenset(
    {ColorFinish.INDIVIDUAL, ColorFinish.FROZEN}
)

# ---------- Wheels ----------


def m5_without_m_wheels(config: Configuration) -> bool:
    return config.model == ModelVariant.M5 and not config.wheels.is_m_series


def competition_without_21_inch(config: Configuration) -> bool:
    return (
        config.performance_package == PerformancePackage.COMPETITION
        and "21" not in config.wheels.id
    )


# ---------- Brakes ----------


def ceramic_brakes_without_package(config: Configuration) -> bool:
    return (
        config.brakes == BrakeTier.CERAMIC
        and config.performance_package == PerformancePackage.NONE
    )


# ---------- Color ----------


def exclusive_color_without_m5(config: Configuration) -> bool:
    return (
        config.color.finish in EXCLUSIVE_FINISHES
        and config.model != ModelVariant.M5
    )


# ---------- Interior ----------


def extended_merino_without_m5(config: Configuration) -> bool:
    return (
        config.interior.leather == LeatherType.EXTENDED_MERINO
        and config.model != ModelVariant.M5
    )


def carbon_trim_without_package(config: Configuration) -> bool:
    return (
        config.interior.trim == InteriorTrim.CARBON
        and config.performance_package == PerformancePackage.NONE
    )


# ---------- Tech ----------


def assistant_pro_without_laser(config: Configuration) -> bool:
    return (
        config.driving_assistant == DrivingAssistant.PRO
        and config.lights != LightType.LASER
    )


def m5_with_standard_sound(config: Configuration) -> bool:
    return config.model == ModelVariant.M5 and config.sound == SoundSystem.STANDARD
