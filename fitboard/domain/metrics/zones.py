"""Heart rate training zones derived from age."""

from __future__ import annotations

import math
from typing import List

from ...models import HeartRateZone, HeartRateZones, RawActivity, TrainingZoneAnalysis

ZONE2_TRAINING_THRESHOLD = 60.0

_ZONE_DEFINITIONS = [
    (0.5, 0.6, "Recovery", "Easy jogging, active recovery"),
    (0.6, 0.7, "Aerobic endurance", "Base pace that builds aerobic capacity"),
    (0.7, 0.8, "Tempo", "Marathon pace, endurance"),
    (0.8, 0.9, "Lactate threshold", "Threshold work and intervals"),
    (0.9, 1.0, "Maximum effort", "Maximum intensity, sprints"),
]

NO_HEART_RATE = "No heart rate data - train with a heart rate monitor to analyse zones"
ZONE2_EXCELLENT = "Excellent! Most of the session was in zone 2, ideal for aerobic base"
ZONE2_GOOD = "Good! Zone 2 dominates this session - keep this pace"
ZONE2_PARTIAL = "Partly in zone 2 - try to extend the time spent in this zone"
ZONE2_MISSING = "No time in zone 2 - consider a slower pace to build endurance"
HIGH_INTENSITY = "High intensity - remember to recover between sessions"
MOSTLY_ZONE1 = "A lot of time in zone 1 - consider increasing the intensity"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def training_zones(age: int) -> HeartRateZones:
    """Build five contiguous zones from ``220 - age``.

    Boundaries are rounded to whole beats, so each zone's max equals the
    next zone's min and zone 5 ends exactly at the maximum heart rate.
    """
    max_hr = 220 - age
    zones = []
    for lower, upper, name, description in _ZONE_DEFINITIONS:
        zones.append(
            HeartRateZone(
                min=_round_half_up(max_hr * lower),
                max=max_hr if upper == 1.0 else _round_half_up(max_hr * upper),
                name=name,
                description=description,
            )
        )
    return HeartRateZones(
        max_heart_rate=max_hr,
        zone1=zones[0],
        zone2=zones[1],
        zone3=zones[2],
        zone4=zones[3],
        zone5=zones[4],
    )


def zone_index(heart_rate: float, zones: HeartRateZones) -> int | None:
    """Return the 1-based zone containing ``heart_rate`` or ``None``."""
    ordered = zones.ordered()
    for index, zone in enumerate(ordered, start=1):
        upper_ok = heart_rate <= zone.max if index == len(ordered) else heart_rate < zone.max
        if zone.min <= heart_rate and upper_ok:
            return index
    return None


def analyze_training_zones(
    activity: RawActivity, zones: HeartRateZones
) -> TrainingZoneAnalysis:
    """Attribute the whole moving time to the zone of the average heart rate.

    Only one average value exists per activity, so this is a coarse
    approximation rather than a per-sample breakdown.
    """
    total_time = activity.moving_time
    if not activity.average_heartrate:
        return TrainingZoneAnalysis(total_time=total_time, recommendations=[NO_HEART_RATE])

    times = [0, 0, 0, 0, 0]
    index = zone_index(activity.average_heartrate, zones)
    if index is not None:
        times[index - 1] = total_time

    zone1_time, zone2_time, zone3_time, zone4_time, zone5_time = times
    zone2_percentage = zone2_time / total_time * 100 if total_time > 0 else 0.0

    recommendations: List[str] = []
    if zone2_percentage >= 80:
        recommendations.append(ZONE2_EXCELLENT)
    elif zone2_percentage >= 50:
        recommendations.append(ZONE2_GOOD)
    elif zone2_percentage > 0:
        recommendations.append(ZONE2_PARTIAL)
    else:
        recommendations.append(ZONE2_MISSING)

    if zone4_time > 0 or zone5_time > 0:
        recommendations.append(HIGH_INTENSITY)

    if zone1_time > total_time * 0.5:
        recommendations.append(MOSTLY_ZONE1)

    return TrainingZoneAnalysis(
        total_time=total_time,
        zone1_time=zone1_time,
        zone2_time=zone2_time,
        zone3_time=zone3_time,
        zone4_time=zone4_time,
        zone5_time=zone5_time,
        zone2_percentage=zone2_percentage,
        recommendations=recommendations,
    )


def is_zone2_training(analysis: TrainingZoneAnalysis) -> bool:
    return analysis.zone2_percentage >= ZONE2_TRAINING_THRESHOLD
