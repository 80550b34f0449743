"""Heat-map layers and their combination."""

from huck.heatmap.combiner import (
    HeatMapData,
    HeatMapModes,
    calculate_heat_map,
    combined_heat_map_sum,
)
from huck.heatmap.grid import Grid, GridSpec

__all__ = [
    "Grid",
    "GridSpec",
    "HeatMapData",
    "HeatMapModes",
    "calculate_heat_map",
    "combined_heat_map_sum",
]
