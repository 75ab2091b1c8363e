import hypothesis.strategies


def non_integer_real_numbers(
    min_value: float = -100.0,
    max_value: float = 100.0,
    min_distance: float = 0.01,
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for real numbers at least ``min_distance`` from an integer."""
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        allow_nan=False,
        allow_infinity=False,
    ).filter(lambda x: abs(x - round(x)) > min_distance)
