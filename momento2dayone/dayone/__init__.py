"""Day One projection and import module."""

from .importer import DayOneImporter, check_environment
from .projection import project, project_all
from .schemas import DayOneCompatible, DayOneEntry, ImportResult

__all__ = [
    "DayOneImporter",
    "check_environment",
    "project",
    "project_all",
    "DayOneCompatible",
    "DayOneEntry",
    "ImportResult"
]
