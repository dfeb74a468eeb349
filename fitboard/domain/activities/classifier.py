"""Activity type taxonomy and category helpers."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, List

from ...models import ActivityCategory, NormalizedActivity, RawActivity

CYCLING_TYPES: FrozenSet[str] = frozenset({"Ride", "Handcycle", "Velomobile"})
RUNNING_TYPES: FrozenSet[str] = frozenset({"Run", "Walk", "Hike"})

# Only used by the finer-grained filters, never by classify().
CYCLING_VARIANTS: FrozenSet[str] = frozenset(
    {"VirtualRide", "EBikeRide", "MountainBikeRide", "GravelRide", "EMountainBikeRide"}
)
RUNNING_VARIANTS: FrozenSet[str] = frozenset({"VirtualRun", "TrailRun"})

_NORMALIZED_FIELDS = {"category", "is_cycling", "is_running"}

ACTIVITY_TYPE_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "Ride": "Bike ride",
        "Run": "Run",
        "Walk": "Walk",
        "Hike": "Hike",
        "Swim": "Swim",
        "Yoga": "Yoga",
        "Workout": "Workout",
        "Handcycle": "Handcycle",
        "Velomobile": "Velomobile",
        "AlpineSki": "Alpine skiing",
        "BackcountrySki": "Backcountry skiing",
        "Canoeing": "Canoeing",
        "Crossfit": "Crossfit",
        "Elliptical": "Elliptical",
        "Golf": "Golf",
        "IceSkate": "Ice skating",
        "InlineSkate": "Inline skating",
        "Kayaking": "Kayaking",
        "Kettlebell": "Kettlebell",
        "NordicSki": "Cross-country skiing",
        "RockClimbing": "Rock climbing",
        "RollerSki": "Roller skiing",
        "Rowing": "Rowing",
        "Snowboard": "Snowboard",
        "Snowshoe": "Snowshoeing",
        "StairStepper": "Stair stepper",
        "StandUpPaddling": "Stand-up paddling",
        "Surfing": "Surfing",
        "WeightTraining": "Weight training",
        "Wheelchair": "Wheelchair",
    },
    "pl": {
        "Ride": "Jazda rowerem",
        "Run": "Bieg",
        "Walk": "Spacer",
        "Hike": "Wędrówka",
        "Swim": "Pływanie",
        "Yoga": "Joga",
        "Workout": "Trening",
        "Handcycle": "Rower ręczny",
        "Velomobile": "Velomobile",
        "AlpineSki": "Narciarstwo alpejskie",
        "BackcountrySki": "Narciarstwo backcountry",
        "Canoeing": "Kajakarstwo",
        "Crossfit": "Crossfit",
        "Elliptical": "Orbitrek",
        "Golf": "Golf",
        "IceSkate": "Łyżwiarstwo",
        "InlineSkate": "Rolki",
        "Kayaking": "Kajakarstwo",
        "Kettlebell": "Kettlebell",
        "NordicSki": "Narciarstwo biegowe",
        "RockClimbing": "Wspinaczka",
        "RollerSki": "Narty rolkowe",
        "Rowing": "Wioślarstwo",
        "Snowboard": "Snowboard",
        "Snowshoe": "Rakiety śnieżne",
        "StairStepper": "Stepper",
        "StandUpPaddling": "SUP",
        "Surfing": "Surfing",
        "WeightTraining": "Trening siłowy",
        "Wheelchair": "Wózek inwalidzki",
    },
}


def category_for_type(activity_type: str | None) -> ActivityCategory:
    """Map a raw type name to its category; unknown names are ``other``."""
    if activity_type in CYCLING_TYPES:
        return ActivityCategory.CYCLING
    if activity_type in RUNNING_TYPES:
        return ActivityCategory.RUNNING
    return ActivityCategory.OTHER


def classify(activity: RawActivity) -> NormalizedActivity:
    """Attach a category to ``activity``.

    Accepts already normalized activities as well; their previous category
    is discarded and recomputed from the raw type.
    """
    category = category_for_type(activity.type)
    return NormalizedActivity(
        **activity.model_dump(exclude=_NORMALIZED_FIELDS),
        category=category,
        is_cycling=category is ActivityCategory.CYCLING,
        is_running=category is ActivityCategory.RUNNING,
    )


def classify_all(activities: Iterable[RawActivity]) -> List[NormalizedActivity]:
    return [classify(activity) for activity in activities]


def matches_category(
    activity: NormalizedActivity,
    category: ActivityCategory,
    *,
    include_variants: bool = False,
) -> bool:
    if activity.category == category:
        return True
    if not include_variants:
        return False
    if category == ActivityCategory.CYCLING:
        return activity.type in CYCLING_VARIANTS
    if category == ActivityCategory.RUNNING:
        return activity.type in RUNNING_VARIANTS
    return False


def filter_by_category(
    activities: Iterable[NormalizedActivity],
    category: ActivityCategory,
    *,
    include_variants: bool = False,
) -> List[NormalizedActivity]:
    return [
        activity
        for activity in activities
        if matches_category(activity, category, include_variants=include_variants)
    ]


def group_by_category(
    activities: Iterable[NormalizedActivity],
) -> Dict[ActivityCategory, List[NormalizedActivity]]:
    grouped: Dict[ActivityCategory, List[NormalizedActivity]] = defaultdict(list)
    for activity in activities:
        grouped[activity.category].append(activity)
    return dict(grouped)


def activity_type_label(activity_type: str, language: str = "en") -> str:
    """Human readable name of a raw type, falling back to the raw name."""
    labels = ACTIVITY_TYPE_LABELS.get(language, ACTIVITY_TYPE_LABELS["en"])
    return labels.get(activity_type, activity_type)
