"""Google Fit numeric activity codes mapped to Strava-style type names."""

from __future__ import annotations

from typing import Dict, Optional

GOOGLE_FIT_ACTIVITY_TYPES: Dict[int, str] = {
    1: "Ride",
    7: "Walk",
    8: "Run",
    9: "Workout",
    14: "Handcycle",
    15: "MountainBikeRide",
    16: "Ride",
    17: "VirtualRide",
    18: "VirtualRide",
    19: "Ride",
    25: "Elliptical",
    32: "Golf",
    35: "Hike",
    40: "Kayaking",
    53: "Rowing",
    56: "Run",
    57: "Run",
    58: "VirtualRun",
    65: "AlpineSki",
    67: "NordicSki",
    73: "Snowboard",
    80: "WeightTraining",
    82: "Swim",
    93: "Walk",
    94: "Walk",
    95: "Walk",
    100: "Yoga",
    103: "Rowing",
    113: "Crossfit",
    114: "Workout",
}


def activity_type_name(code: int) -> Optional[str]:
    """Return the named type for ``code`` or ``None`` when it is not mapped."""

    return GOOGLE_FIT_ACTIVITY_TYPES.get(code)
