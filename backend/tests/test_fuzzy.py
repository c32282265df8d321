"""Tests for fuzzy sets, variables, rules and the weapon desirability module."""
import pytest
from gameai.core.fuzzy import (
    DefuzzifyMethod,
    FuzzyModule,
    FuzzySetLeftShoulder,
    FuzzySetRightShoulder,
    FuzzySetSingleton,
    FuzzySetTriangle,
    FuzzyVariable,
    FzAND,
    FzFairly,
    FzOR,
    FzSet,
    FzVery,
    AMMO,
    DESIRABILITY,
    DISTANCE,
    build_weapon_desirability_module,
    weapon_desirability,
)


@pytest.fixture
def desirability():
    """Output variable with three sets over 0..100."""
    var = FuzzyVariable()
    var.add_left_shoulder_set("undesirable", 0, 25, 50)
    var.add_triangular_set("desirable", 25, 50, 75)
    var.add_right_shoulder_set("very_desirable", 50, 75, 100)
    return var


class TestFuzzySets:
    """Test cases for membership functions."""

    @pytest.mark.parametrize("value,expected", [
        (50, 1.0), (25, 0.0), (37.5, 0.5), (62.5, 0.5), (75, 0.0), (10, 0.0),
    ])
    def test_triangle(self, value, expected):
        """Test triangle membership."""
        assert FuzzySetTriangle(50, 25, 25).calculate_dom(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value,expected", [
        (0, 1.0), (25, 1.0), (87.5, 0.5), (150, 0.0),
    ])
    def test_left_shoulder(self, value, expected):
        """Test left shoulder membership."""
        assert FuzzySetLeftShoulder(25, 25, 125).calculate_dom(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value,expected", [
        (150, 0.0), (225, 0.5), (300, 1.0), (1000, 1.0), (1001, 0.0),
    ])
    def test_right_shoulder(self, value, expected):
        """Test right shoulder membership."""
        assert FuzzySetRightShoulder(300, 150, 700).calculate_dom(value) == pytest.approx(expected)

    def test_singleton(self):
        """Test singleton membership."""
        fuzzy_set = FuzzySetSingleton(10, 2, 2)

        assert fuzzy_set.calculate_dom(8) == 1.0
        assert fuzzy_set.calculate_dom(12) == 1.0
        assert fuzzy_set.calculate_dom(7) == 0.0

    def test_zero_offset_peak(self):
        """Test that a zero offset at the peak does not divide by zero."""
        fuzzy_set = FuzzySetTriangle(0, 0, 10)

        assert fuzzy_set.calculate_dom(0) == 1.0
        assert fuzzy_set.calculate_dom(5) == pytest.approx(0.5)

    def test_representative_values(self):
        """Test representative values of the set shapes."""
        assert FuzzySetTriangle(50, 25, 25).representative_value == 50
        assert FuzzySetLeftShoulder(25, 25, 25).representative_value == 12.5
        assert FuzzySetRightShoulder(75, 25, 25).representative_value == 87.5

    def test_or_with_dom_keeps_max(self):
        """Test that OR-ing a DOM keeps the larger value."""
        fuzzy_set = FuzzySetTriangle(50, 25, 25)
        fuzzy_set.or_with_dom(0.4)
        fuzzy_set.or_with_dom(0.2)

        assert fuzzy_set.get_dom() == 0.4
        fuzzy_set.clear_dom()
        assert fuzzy_set.get_dom() == 0.0


class TestFuzzyTerms:
    """Test cases for operators and hedges."""

    @pytest.fixture
    def terms(self):
        a = FuzzySetTriangle(50, 25, 25)
        b = FuzzySetTriangle(50, 25, 25)
        a.or_with_dom(0.3)
        b.or_with_dom(0.8)
        return FzSet(a), FzSet(b)

    def test_and_or(self, terms):
        """Test min and max."""
        a, b = terms

        assert FzAND(a, b).get_dom() == 0.3
        assert FzOR(a, b).get_dom() == 0.8
        assert (a & b).get_dom() == 0.3
        assert (a | b).get_dom() == 0.8

    def test_empty_operators(self):
        """Test operators without operands."""
        assert FzAND().get_dom() == 0.0
        assert FzOR().get_dom() == 0.0

    def test_hedges(self):
        """Test very and fairly."""
        fuzzy_set = FuzzySetTriangle(50, 25, 25)
        fuzzy_set.or_with_dom(0.25)

        assert FzVery(FzSet(fuzzy_set)).get_dom() == pytest.approx(0.0625)
        assert FzFairly(FzSet(fuzzy_set)).get_dom() == pytest.approx(0.5)


class TestFuzzyVariable:
    """Test cases for linguistic variables."""

    def test_range_grows(self, desirability):
        """Test that adding sets extends the range."""
        assert desirability.min_range == 0
        assert desirability.max_range == 100

    def test_fuzzify_out_of_range(self, desirability):
        """Test that values outside the range are rejected."""
        with pytest.raises(ValueError):
            desirability.fuzzify(150)

    def test_peak_outside_bounds(self):
        """Test that a set's peak must lie within its bounds."""
        with pytest.raises(ValueError):
            FuzzyVariable().add_triangular_set("bad", 10, 5, 20)

    def test_max_av(self, desirability):
        """Test the weighted average of representative values."""
        desirability.sets["desirable"].or_with_dom(0.5)
        desirability.sets["very_desirable"].or_with_dom(0.5)

        assert desirability.defuzzify_max_av() == pytest.approx(68.75)

    def test_no_membership_defuzzifies_to_zero(self, desirability):
        """Test that nothing fired gives zero."""
        assert desirability.defuzzify_max_av() == 0.0
        assert desirability.defuzzify_centroid() == 0.0

    def test_centroid_single_set(self, desirability):
        """Test that a single fully fired symmetric set centers on its peak."""
        desirability.sets["desirable"].or_with_dom(1.0)

        assert desirability.defuzzify_centroid(100) == pytest.approx(50.0)


class TestWeaponDesirability:
    """Test cases for the weapon selection module."""

    def test_medium_distance_low_ammo(self):
        """Test a situation where several rules fire."""
        value = weapon_desirability(200, 8, method=DefuzzifyMethod.MAX_AV)

        assert value == pytest.approx(60.4167, abs=1e-3)

    def test_close_range_is_undesirable(self):
        """Test that only the undesirable set fires at close range."""
        assert weapon_desirability(10, 50) == pytest.approx(12.5)

    def test_medium_range_with_ammo(self):
        """Test medium/far mix with plenty of ammo."""
        assert weapon_desirability(200, 50) == pytest.approx(75.0)

    def test_centroid_in_range(self):
        """Test that the centroid stays within the output range."""
        value = weapon_desirability(200, 8, method=DefuzzifyMethod.CENTROID)

        assert 0.0 < value < 100.0

    def test_consequents_reset_between_runs(self):
        """Test that a module can be reused for a second situation."""
        fm = build_weapon_desirability_module()

        fm.fuzzify(DISTANCE, 200)
        fm.fuzzify(AMMO, 8)
        first = fm.defuzzify(DESIRABILITY, DefuzzifyMethod.MAX_AV)
        fm.fuzzify(DISTANCE, 10)
        fm.fuzzify(AMMO, 50)
        second = fm.defuzzify(DESIRABILITY, DefuzzifyMethod.MAX_AV)

        assert first == pytest.approx(60.4167, abs=1e-3)
        assert second == pytest.approx(12.5)

    def test_unknown_variable(self):
        """Test that an unknown variable name is rejected."""
        with pytest.raises(ValueError):
            FuzzyModule().fuzzify("speed", 1.0)
