from .activity_types import GOOGLE_FIT_ACTIVITY_TYPES, activity_type_name

__all__ = ["GOOGLE_FIT_ACTIVITY_TYPES", "activity_type_name"]
