"""AI positioning built on the heat-map layers."""

from huck.positioning.defender import position_defender_optimal
from huck.positioning.sampling import (
    RandomSource,
    position_offender_optimal,
    sample_weighted_cell,
)
from huck.positioning.stack import position_offender_stack

__all__ = [
    "RandomSource",
    "position_defender_optimal",
    "position_offender_optimal",
    "position_offender_stack",
    "sample_weighted_cell",
]
