"""Mini README: Mission accounting for generated trajectories.

Exports the summary reducer, its record type and the wind scenario
comparison used by interfaces to contrast official and playground runs.
"""

from .comparison import MissionComparison, compare_wind_scenarios
from .summary import MissionSummary, calculate_mission_summary, format_flight_time

__all__ = [
    "MissionComparison",
    "MissionSummary",
    "calculate_mission_summary",
    "compare_wind_scenarios",
    "format_flight_time",
]
