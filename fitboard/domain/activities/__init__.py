"""Activity classification helpers."""

from .classifier import (
    CYCLING_TYPES,
    CYCLING_VARIANTS,
    RUNNING_TYPES,
    RUNNING_VARIANTS,
    activity_type_label,
    category_for_type,
    classify,
    classify_all,
    filter_by_category,
    group_by_category,
    matches_category,
)

__all__ = [
    "CYCLING_TYPES",
    "CYCLING_VARIANTS",
    "RUNNING_TYPES",
    "RUNNING_VARIANTS",
    "activity_type_label",
    "category_for_type",
    "classify",
    "classify_all",
    "filter_by_category",
    "group_by_category",
    "matches_category",
]
