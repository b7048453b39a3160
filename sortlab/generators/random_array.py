import random
from typing import List, Optional

from sortlab.sort_errors import InvalidBoundsError


def generate_random_array(
    length: int,
    min_value: int,
    max_value: int,
    *,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Build a benchmark fixture of *length* integers drawn uniformly from the
    half-open range [min_value, max_value).

    Pass a seeded random.Random as *rng* for a reproducible fixture; the
    module-level generator is used otherwise.
    """
    if length < 0:
        raise InvalidBoundsError(
            f"Array length must be non-negative, got {length}",
            length=length, min_value=min_value, max_value=max_value,
        )
    if length == 0:
        return []
    if min_value >= max_value:
        raise InvalidBoundsError(
            f"Empty range [{min_value}, {max_value})",
            length=length, min_value=min_value, max_value=max_value,
        )

    draw = rng.randrange if rng is not None else random.randrange
    return [draw(min_value, max_value) for _ in range(length)]
