"""
Measured lengths: a numeric value paired with a unit of measure
"""

import math
from dataclasses import dataclass
from enum import Enum


class Unit(Enum):
    """Units of measure. Percentage and user units are relative."""
    IN = "in"
    CM = "cm"
    MM = "mm"
    PT = "pt"
    PCT = "%"
    USER = "u"

    def __str__(self):
        return self.value

    @property
    def is_relative(self):
        return self in (Unit.PCT, Unit.USER)


REAL_UNITS = (Unit.IN, Unit.CM, Unit.MM, Unit.PT)

# Milli-inches per unit, for the physical units only
_MI_PER_UNIT = {
    Unit.IN: 1000.0,
    Unit.CM: 1000.0 / 2.54,
    Unit.MM: 1000.0 / 25.4,
    Unit.PT: 1000.0 / 72.0,
}


@dataclass(frozen=True)
class Measure:
    """A length: numeric value plus units."""
    value: float
    units: Unit = Unit.IN

    def __str__(self):
        return f"{self.value:g}{self.units}"

    @classmethod
    def parse(cls, text):
        """
        Parse a measure from text such as ``"0.5in"`` or ``"12 pt"``.

        Raises
        ------
        ValueError
            If the text does not hold a number followed by a known unit tag.
        """
        s = str(text).strip()
        for unit in sorted(Unit, key=lambda u: -len(u.value)):
            if s.endswith(unit.value):
                number = s[:-len(unit.value)].strip()
                return cls(float(number), unit)
        raise ValueError(f"Not a measure: {text!r}")

    def to_milli_inches(self):
        """Physical length in milli-inches. Relative measures have none."""
        if self.units.is_relative:
            raise ValueError(f"Relative measure {self} has no physical length")
        return self.value * _MI_PER_UNIT[self.units]

    def convert(self, units, constraints=None):
        """
        Return the equivalent measure in other physical units.

        A relative measure (or a conversion to relative units) is returned
        unchanged. When ``constraints`` is given, the converted value is
        rounded to its digit limits.
        """
        if units == self.units or self.units.is_relative or units.is_relative:
            return self
        converted = Measure(self.to_milli_inches() / _MI_PER_UNIT[units], units)
        return constraints.round(converted) if constraints is not None else converted


def _round_digits(value, sig_digits, frac_digits):
    if value == 0 or not math.isfinite(value):
        return value
    value = round(value, frac_digits)
    return float(f"{value:.{sig_digits}g}")


@dataclass(frozen=True)
class Constraints:
    """
    Restrictions on a measure: numeric range, digit precision, and whether
    the relative units are allowed.
    """
    min: float = -1.0e9
    max: float = 1.0e9
    max_sig_digits: int = 7
    max_frac_digits: int = 3
    allow_pct: bool = True
    allow_user: bool = True

    def round(self, measure):
        """Round a measure's value to the allowed number of digits."""
        return Measure(
            _round_digits(float(measure.value), self.max_sig_digits, self.max_frac_digits),
            measure.units,
        )

    def allows_units(self, units):
        if units == Unit.PCT:
            return self.allow_pct
        if units == Unit.USER:
            return self.allow_user
        return True

    def is_valid(self, measure):
        """Does the measure satisfy these constraints?"""
        if not isinstance(measure, Measure):
            return False
        try:
            value = float(measure.value)
        except (TypeError, ValueError):
            return False
        if not math.isfinite(value):
            return False
        return self.allows_units(measure.units) and self.min <= value <= self.max

    @property
    def units(self):
        """Units a measure editor should offer under these constraints."""
        extra = []
        if self.allow_pct:
            extra.append(Unit.PCT)
        if self.allow_user:
            extra.append(Unit.USER)
        return REAL_UNITS + tuple(extra)


# Constraints shared across node types
LOCATION_CONSTRAINTS = Constraints(-1.0e4, 1.0e4, 7, 3, True, True)
SIZE_CONSTRAINTS = Constraints(0.0, 1.0e4, 7, 3, True, True)
MARGIN_CONSTRAINTS = Constraints(0.0, 1.0e4, 7, 3, False, False)
STROKE_WIDTH_CONSTRAINTS = Constraints(0.0, 1000.0, 4, 3, False, False)
SYMBOL_SIZE_CONSTRAINTS = Constraints(0.0, 1000.0, 4, 3, False, False)
END_CAP_SIZE_CONSTRAINTS = Constraints(0.0, 1000.0, 4, 3, False, False)
BOX_WIDTH_CONSTRAINTS = Constraints(0.0, 1000.0, 4, 3, True, True)
