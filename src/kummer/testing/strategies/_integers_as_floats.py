from typing import Iterable

import hypothesis.strategies


def integers_as_floats(
    min_value: int = -100,
    max_value: int = 100,
    excluded: Iterable[int] = (),
) -> hypothesis.strategies.SearchStrategy[float]:
    """Strategy for integer parameters passed as floats, skipping ``excluded``."""
    excluded = frozenset(excluded)
    return (
        hypothesis.strategies.integers(min_value=min_value, max_value=max_value)
        .filter(lambda n: n not in excluded)
        .map(float)
    )
