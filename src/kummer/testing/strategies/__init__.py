"""Hypothesis strategies for 1F1 parameter triples."""

from ._avoiding_poles import avoiding_poles
from ._avoiding_values import avoiding_values
from ._integers_as_floats import integers_as_floats
from ._kummer_reflection_triples import kummer_reflection_triples
from ._non_integer_real_numbers import non_integer_real_numbers
from ._recurrence_test_values import recurrence_test_values

__all__ = [
    # Numeric strategies
    "avoiding_values",
    "avoiding_poles",
    "non_integer_real_numbers",
    "integers_as_floats",
    # Parameter triples
    "kummer_reflection_triples",
    "recurrence_test_values",
]
