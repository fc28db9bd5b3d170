"""Unit tests for the static option catalog."""

import pytest

from configurator.domain.catalog import (
    AVAILABLE_COLORS,
    AVAILABLE_WHEELS,
    _validate_unique_ids,
    display_name,
    find_mode,
    find_option,
    list_modes,
    list_options,
)
from configurator.domain.value_objects import (
    CATALOG_DIMENSIONS,
    ColorFinish,
    ColorOption,
    Dimension,
    LightType,
    Option,
    PerformancePackage,
    WheelType,
)


class TestListOptions:
    """Tests for list_options and list_modes."""

    def test_catalog_dimensions_are_non_empty(self) -> None:
        """Every catalog dimension declares at least one option."""
        for dimension in CATALOG_DIMENSIONS:
            assert len(list_options(dimension)) > 0

    def test_declaration_order_is_preserved(self) -> None:
        """Options are returned in declaration order."""
        assert list_options(Dimension.WHEELS) == AVAILABLE_WHEELS
        assert list_options(Dimension.COLOR)[0].id == "alpine-white"

    def test_ids_unique_within_dimension(self) -> None:
        """No two options of a dimension share an id."""
        for dimension in CATALOG_DIMENSIONS:
            ids = [o.id for o in list_options(dimension)]
            assert len(ids) == len(set(ids))

    def test_mode_dimension_has_no_catalog_options(self) -> None:
        """Mode dimensions yield an empty option tuple."""
        assert list_options(Dimension.LIGHTS) == ()

    def test_list_modes(self) -> None:
        """Mode dimensions list their closed value set."""
        assert list_modes(Dimension.PERFORMANCE_PACKAGE) == (
            PerformancePackage.NONE,
            PerformancePackage.PERFORMANCE,
            PerformancePackage.COMPETITION,
        )

    def test_list_modes_of_catalog_dimension_is_empty(self) -> None:
        """Catalog dimensions have no mode values."""
        assert list_modes(Dimension.COLOR) == ()

    def test_accepts_plain_string_dimension(self) -> None:
        """Dimension names are accepted as plain strings."""
        assert list_options("wheels") == AVAILABLE_WHEELS


class TestFindOption:
    """Tests for find_option."""

    def test_known_id(self) -> None:
        """A declared id resolves to its option."""
        option = find_option(Dimension.WHEELS, "m-star-spoke-21")
        assert option is not None
        assert option.name == 'M Star-Spoke 21"'
        assert option.size == 21

    def test_unknown_id_returns_none(self) -> None:
        """An undeclared id is a lookup miss, not an error."""
        assert find_option(Dimension.WHEELS, "does-not-exist") is None

    def test_id_scoped_to_dimension(self) -> None:
        """A color id does not resolve in the wheels dimension."""
        assert find_option(Dimension.WHEELS, "sapphire-black") is None

    def test_empty_id_returns_none(self) -> None:
        """An empty id never matches."""
        assert find_option(Dimension.COLOR, "") is None


class TestFindMode:
    """Tests for find_mode."""

    def test_known_value(self) -> None:
        """A value inside the closed set parses to its member."""
        assert find_mode(Dimension.LIGHTS, "laser") is LightType.LASER

    def test_unknown_value_returns_none(self) -> None:
        """A value outside the closed set is a lookup miss."""
        assert find_mode(Dimension.LIGHTS, "xenon") is None

    def test_catalog_dimension_returns_none(self) -> None:
        """Catalog dimensions have no modes to parse."""
        assert find_mode(Dimension.COLOR, "black") is None


class TestDisplayName:
    """Tests for display_name."""

    def test_catalog_option(self) -> None:
        """Catalog ids resolve to the option name."""
        assert display_name(Dimension.COLOR, "sapphire-black") == "Sapphire Black Metallic"

    def test_mode_value(self) -> None:
        """Mode values resolve to their label."""
        assert display_name(Dimension.PERFORMANCE_PACKAGE, "competition") == "M Competition"

    def test_unknown_returns_none(self) -> None:
        """Unknown values resolve to None."""
        assert display_name(Dimension.SOUND, "mono") is None
        assert display_name(Dimension.GRILLE, "gold") is None


class TestOptionRecords:
    """Tests for Option value objects."""

    def test_color_finish(self) -> None:
        """Color options expose their finish."""
        frozen = [c for c in AVAILABLE_COLORS if c.finish == ColorFinish.FROZEN]
        assert {c.id for c in frozen} == {"frozen-deep-grey", "frozen-marina-bay-blue"}

    def test_m_series_wheels(self) -> None:
        """Only the standard wheel lacks the m- prefix."""
        non_m = [w.id for w in AVAILABLE_WHEELS if not w.is_m_series]
        assert non_m == ["standard-19"]

    def test_wheel_type(self) -> None:
        """Wheel options expose their type."""
        forged = find_option(Dimension.WHEELS, "m-performance-forge-21")
        assert forged.wheel_type == WheelType.M_PERFORMANCE

    def test_options_are_immutable(self) -> None:
        """Options are frozen."""
        option = AVAILABLE_COLORS[0]
        with pytest.raises(AttributeError):
            option.price = 10  # type: ignore[misc]

    def test_empty_id_rejected(self) -> None:
        """Options must have an id."""
        with pytest.raises(ValueError, match="id"):
            Option("", "Nameless", "solid")

    def test_negative_price_rejected(self) -> None:
        """Prices are non-negative."""
        with pytest.raises(ValueError, match="negative price"):
            ColorOption("cheap", "Cheap", ColorFinish.SOLID, -1)

    def test_prices_non_negative(self) -> None:
        """Every declared option has a non-negative price."""
        for dimension in CATALOG_DIMENSIONS:
            assert all(o.price >= 0 for o in list_options(dimension))

    def test_duplicate_option_id_rejected(self) -> None:
        """A dimension declaring an option id twice is rejected."""
        paint = ColorOption("twin", "Twin", ColorFinish.SOLID, 0)
        with pytest.raises(ValueError, match="Duplicate option id 'twin' in color"):
            _validate_unique_ids(Dimension.COLOR, (paint, paint))


class TestLabels:
    """Tests for mode labels."""

    def test_labels_do_not_collide_across_enums(self) -> None:
        """Enums sharing a value keep their own labels."""
        assert PerformancePackage.NONE.label == "Base"
        assert find_mode(Dimension.DRIVING_ASSISTANT, "none").label == "None"
        assert find_mode(Dimension.SOUND, "standard").label == "HiFi"
        assert find_mode(Dimension.BRAKES, "standard").label == "M Compound"
