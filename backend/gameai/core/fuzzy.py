"""Fuzzy logic inference: membership sets, linguistic variables, rules and defuzzification."""
import logging
import math
from enum import Enum
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_NUM_SAMPLES = 15


def is_equal(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-12)


class FuzzySet:
    """Base membership function with a stored degree of membership (DOM)."""

    def __init__(self, peak: float, left_offset: float, right_offset: float, representative_value: float):
        self.peak = peak
        self.left_offset = left_offset
        self.right_offset = right_offset
        self.representative_value = representative_value
        self.dom = 0.0

    def calculate_dom(self, value: float) -> float:
        raise NotImplementedError

    def or_with_dom(self, value: float) -> None:
        if value > self.dom:
            self.dom = value

    def clear_dom(self) -> None:
        self.dom = 0.0

    def get_dom(self) -> float:
        return self.dom


class FuzzySetTriangle(FuzzySet):
    """Triangle rising from peak-left to 1 at peak, falling to 0 at peak+right."""

    def __init__(self, peak: float, left_offset: float, right_offset: float):
        super().__init__(peak, left_offset, right_offset, peak)

    def calculate_dom(self, value: float) -> float:
        peak, left, right = self.peak, self.left_offset, self.right_offset
        # Zero offsets would divide by zero below
        if is_equal(peak, value) and (is_equal(left, 0.0) or is_equal(right, 0.0)):
            return 1.0
        if peak - left <= value <= peak:
            return (value - (peak - left)) / left
        if peak < value < peak + right:
            return -(value - peak) / right + 1.0
        return 0.0


class FuzzySetLeftShoulder(FuzzySet):
    """Full membership left of the peak, falling to 0 at peak+right."""

    def __init__(self, peak: float, left_offset: float, right_offset: float):
        super().__init__(peak, left_offset, right_offset, peak - left_offset / 2.0)

    def calculate_dom(self, value: float) -> float:
        peak, left, right = self.peak, self.left_offset, self.right_offset
        if is_equal(peak, value) and (is_equal(left, 0.0) or is_equal(right, 0.0)):
            return 1.0
        if peak <= value < peak + right:
            return -(value - peak) / right + 1.0
        if peak - left <= value < peak:
            return 1.0
        return 0.0


class FuzzySetRightShoulder(FuzzySet):
    """Rising from peak-left to 1 at the peak, full membership up to peak+right."""

    def __init__(self, peak: float, left_offset: float, right_offset: float):
        super().__init__(peak, left_offset, right_offset, peak + right_offset / 2.0)

    def calculate_dom(self, value: float) -> float:
        peak, left, right = self.peak, self.left_offset, self.right_offset
        if is_equal(peak, value) and (is_equal(left, 0.0) or is_equal(right, 0.0)):
            return 1.0
        if peak - left < value <= peak:
            return (value - (peak - left)) / left
        if peak < value <= peak + right:
            return 1.0
        return 0.0


class FuzzySetSingleton(FuzzySet):
    """Full membership inside [peak-left, peak+right], none outside."""

    def __init__(self, peak: float, left_offset: float, right_offset: float):
        super().__init__(peak, left_offset, right_offset, peak)

    def calculate_dom(self, value: float) -> float:
        if self.peak - self.left_offset <= value <= self.peak + self.right_offset:
            return 1.0
        return 0.0


class FuzzyTerm:
    """Anything that can appear in a rule: a set proxy, an operator or a hedge."""

    def get_dom(self) -> float:
        raise NotImplementedError

    def clear_dom(self) -> None:
        raise NotImplementedError

    def or_with_dom(self, value: float) -> None:
        raise NotImplementedError

    def __and__(self, other: "FuzzyTerm") -> "FzAND":
        return FzAND(self, other)

    def __or__(self, other: "FuzzyTerm") -> "FzOR":
        return FzOR(self, other)


class FzSet(FuzzyTerm):
    """Proxy so a set owned by a variable can be used in rules."""

    def __init__(self, fuzzy_set: FuzzySet):
        self.set = fuzzy_set

    def get_dom(self) -> float:
        return self.set.get_dom()

    def clear_dom(self) -> None:
        self.set.clear_dom()

    def or_with_dom(self, value: float) -> None:
        self.set.or_with_dom(value)


class FzAND(FuzzyTerm):
    """Minimum of the operands' DOMs."""

    def __init__(self, *terms: FuzzyTerm):
        self.terms: List[FuzzyTerm] = list(terms)

    def get_dom(self) -> float:
        if not self.terms:
            return 0.0
        return min(term.get_dom() for term in self.terms)

    def clear_dom(self) -> None:
        for term in self.terms:
            term.clear_dom()

    def or_with_dom(self, value: float) -> None:
        for term in self.terms:
            term.or_with_dom(value)


class FzOR(FuzzyTerm):
    """Maximum of the operands' DOMs."""

    def __init__(self, *terms: FuzzyTerm):
        self.terms: List[FuzzyTerm] = list(terms)

    def get_dom(self) -> float:
        if not self.terms:
            return 0.0
        return max(term.get_dom() for term in self.terms)

    def clear_dom(self) -> None:
        for term in self.terms:
            term.clear_dom()

    def or_with_dom(self, value: float) -> None:
        for term in self.terms:
            term.or_with_dom(value)


class FzVery(FuzzyTerm):
    """Hedge: DOM squared."""

    def __init__(self, term: FzSet):
        self.term = term

    def get_dom(self) -> float:
        return self.term.get_dom() ** 2

    def clear_dom(self) -> None:
        self.term.clear_dom()

    def or_with_dom(self, value: float) -> None:
        self.term.or_with_dom(value ** 2)


class FzFairly(FuzzyTerm):
    """Hedge: square root of the DOM."""

    def __init__(self, term: FzSet):
        self.term = term

    def get_dom(self) -> float:
        return math.sqrt(self.term.get_dom())

    def clear_dom(self) -> None:
        self.term.clear_dom()

    def or_with_dom(self, value: float) -> None:
        self.term.or_with_dom(math.sqrt(value))


class FuzzyRule:
    """IF antecedent THEN consequence."""

    def __init__(self, antecedent: FuzzyTerm, consequence: FuzzyTerm):
        self.antecedent = antecedent
        self.consequence = consequence

    def set_confidence_of_consequent_to_zero(self) -> None:
        self.consequence.clear_dom()

    def calculate(self) -> None:
        self.consequence.or_with_dom(self.antecedent.get_dom())


class FuzzyVariable:
    """A fuzzy linguistic variable: named sets spanning a value range."""

    def __init__(self):
        self.sets: Dict[str, FuzzySet] = {}
        self.min_range = 0.0
        self.max_range = 0.0

    def _adjust_range_to_fit(self, min_bound: float, max_bound: float) -> None:
        if not self.sets:
            self.min_range, self.max_range = min_bound, max_bound
            return
        self.min_range = min(self.min_range, min_bound)
        self.max_range = max(self.max_range, max_bound)

    def _add(self, name: str, fuzzy_set: FuzzySet, min_bound: float, max_bound: float) -> FzSet:
        if not min_bound <= fuzzy_set.peak <= max_bound:
            raise ValueError(f"Set '{name}': peak must lie between {min_bound} and {max_bound}")
        self._adjust_range_to_fit(min_bound, max_bound)
        self.sets[name] = fuzzy_set
        return FzSet(fuzzy_set)

    def add_left_shoulder_set(self, name: str, min_bound: float, peak: float, max_bound: float) -> FzSet:
        return self._add(name, FuzzySetLeftShoulder(peak, peak - min_bound, max_bound - peak), min_bound, max_bound)

    def add_right_shoulder_set(self, name: str, min_bound: float, peak: float, max_bound: float) -> FzSet:
        return self._add(name, FuzzySetRightShoulder(peak, peak - min_bound, max_bound - peak), min_bound, max_bound)

    def add_triangular_set(self, name: str, min_bound: float, peak: float, max_bound: float) -> FzSet:
        return self._add(name, FuzzySetTriangle(peak, peak - min_bound, max_bound - peak), min_bound, max_bound)

    def add_singleton_set(self, name: str, min_bound: float, peak: float, max_bound: float) -> FzSet:
        return self._add(name, FuzzySetSingleton(peak, peak - min_bound, max_bound - peak), min_bound, max_bound)

    def fuzzify(self, value: float) -> None:
        """Set every member set's DOM for a crisp value."""
        if not self.min_range <= value <= self.max_range:
            raise ValueError(f"Value {value} is outside the range {self.min_range}..{self.max_range}")
        for fuzzy_set in self.sets.values():
            fuzzy_set.dom = fuzzy_set.calculate_dom(value)

    def defuzzify_max_av(self) -> float:
        """Average of the representative values weighted by DOM."""
        bottom = 0.0
        top = 0.0
        for fuzzy_set in self.sets.values():
            bottom += fuzzy_set.get_dom()
            top += fuzzy_set.representative_value * fuzzy_set.get_dom()
        if is_equal(0.0, bottom):
            return 0.0
        return top / bottom

    def defuzzify_centroid(self, num_samples: int = DEFAULT_NUM_SAMPLES) -> float:
        """
        Approximate the centroid of the clipped output shape.

        Each sample's height is the lower of the set's membership at that
        point and the set's current DOM; the centroid is the sum of moments
        over the total area.
        """
        if num_samples < 1:
            raise ValueError("num_samples must be positive")
        step = (self.max_range - self.min_range) / num_samples
        total_area = 0.0
        sum_of_moments = 0.0
        for sample in range(1, num_samples + 1):
            x = self.min_range + sample * step
            for fuzzy_set in self.sets.values():
                contribution = min(fuzzy_set.calculate_dom(x), fuzzy_set.get_dom())
                total_area += contribution
                sum_of_moments += x * contribution
        if is_equal(0.0, total_area):
            return 0.0
        return sum_of_moments / total_area


class DefuzzifyMethod(str, Enum):
    """Defuzzification method enumeration."""
    MAX_AV = "max_av"
    CENTROID = "centroid"


class FuzzyModule:
    """Named variables plus a rule base."""

    def __init__(self, num_samples: int = DEFAULT_NUM_SAMPLES):
        self.variables: Dict[str, FuzzyVariable] = {}
        self.rules: List[FuzzyRule] = []
        self.num_samples = num_samples

    def create_flv(self, name: str) -> FuzzyVariable:
        variable = FuzzyVariable()
        self.variables[name] = variable
        return variable

    def add_rule(self, antecedent: FuzzyTerm, consequence: FuzzyTerm) -> FuzzyRule:
        rule = FuzzyRule(antecedent, consequence)
        self.rules.append(rule)
        return rule

    def _variable(self, name: str) -> FuzzyVariable:
        try:
            return self.variables[name]
        except KeyError:
            raise ValueError(f"Unknown fuzzy variable '{name}'")

    def fuzzify(self, name: str, value: float) -> None:
        self._variable(name).fuzzify(value)

    def set_confidences_of_consequents_to_zero(self) -> None:
        for rule in self.rules:
            rule.set_confidence_of_consequent_to_zero()

    def defuzzify(self, name: str, method: DefuzzifyMethod = DefuzzifyMethod.CENTROID) -> float:
        """Fire every rule and defuzzify the named output variable."""
        variable = self._variable(name)
        self.set_confidences_of_consequents_to_zero()
        for rule in self.rules:
            rule.calculate()

        method = DefuzzifyMethod(method)
        if method == DefuzzifyMethod.MAX_AV:
            result = variable.defuzzify_max_av()
        else:
            result = variable.defuzzify_centroid(self.num_samples)
        logger.debug("Defuzzified %s with %s: %.4f", name, method.value, result)
        return result


DISTANCE = "distance_to_target"
AMMO = "ammo_status"
DESIRABILITY = "desirability"


def build_weapon_desirability_module(num_samples: int = DEFAULT_NUM_SAMPLES) -> FuzzyModule:
    """
    Weapon selection example: distance to target and ammo left -> desirability.

    Distance ranges 0..1000, ammo 0..100, desirability 0..100.
    """
    fm = FuzzyModule(num_samples)

    distance = fm.create_flv(DISTANCE)
    target_close = distance.add_left_shoulder_set("target_close", 0, 25, 150)
    target_medium = distance.add_triangular_set("target_medium", 25, 150, 300)
    target_far = distance.add_right_shoulder_set("target_far", 150, 300, 1000)

    desirability = fm.create_flv(DESIRABILITY)
    undesirable = desirability.add_left_shoulder_set("undesirable", 0, 25, 50)
    desirable = desirability.add_triangular_set("desirable", 25, 50, 75)
    very_desirable = desirability.add_right_shoulder_set("very_desirable", 50, 75, 100)

    ammo = fm.create_flv(AMMO)
    ammo_loads = ammo.add_right_shoulder_set("ammo_loads", 10, 30, 100)
    ammo_okay = ammo.add_triangular_set("ammo_okay", 0, 10, 30)
    ammo_low = ammo.add_triangular_set("ammo_low", 0, 0, 10)

    fm.add_rule(FzAND(target_close, ammo_loads), undesirable)
    fm.add_rule(FzAND(target_close, ammo_okay), undesirable)
    fm.add_rule(FzAND(target_close, ammo_low), undesirable)

    fm.add_rule(FzAND(target_medium, ammo_loads), very_desirable)
    fm.add_rule(FzAND(target_medium, ammo_okay), very_desirable)
    fm.add_rule(FzAND(target_medium, ammo_low), desirable)

    fm.add_rule(FzAND(target_far, ammo_loads), desirable)
    fm.add_rule(FzAND(target_far, ammo_okay), undesirable)
    fm.add_rule(FzAND(target_far, ammo_low), undesirable)

    return fm


def weapon_desirability(
    distance: float,
    ammo: float,
    method: DefuzzifyMethod = DefuzzifyMethod.MAX_AV,
    num_samples: int = DEFAULT_NUM_SAMPLES,
) -> float:
    """Crisp desirability (0..100) of a weapon for the given situation."""
    fm = build_weapon_desirability_module(num_samples)
    fm.fuzzify(DISTANCE, distance)
    fm.fuzzify(AMMO, ammo)
    return fm.defuzzify(DESIRABILITY, method)
