from .state import TrackerState
from .controller import ShellController
from .form import CompanyEntryForm
from .card import CompanyCard

__all__ = [
    "TrackerState",
    "ShellController",
    "CompanyEntryForm",
    "CompanyCard",
]
