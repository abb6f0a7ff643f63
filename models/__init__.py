from models.period import Period
from models.weekly_entry import WeeklyEntry, EntryDraft
from models.class_plan import ClassPlan
from models.reference import ReferenceTable

__all__ = [
    "Period",
    "WeeklyEntry",
    "EntryDraft",
    "ClassPlan",
    "ReferenceTable",
]
