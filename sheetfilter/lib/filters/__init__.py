from __future__ import annotations

from .base import ConfigurationError, FilterError, MissingColumnsError, ValidationError
from .builtins import CustomFiltersFilter
from .criteria import Comparator, FilterCriterion
from .custom_filters import FilterSet
from .registry import FILTER_REGISTRY, build_filter_from_spec, register_filter
from .view import SheetView

__all__ = [
    "Comparator",
    "FilterCriterion",
    "FilterSet",
    "CustomFiltersFilter",
    "SheetView",
    "FILTER_REGISTRY",
    "register_filter",
    "build_filter_from_spec",
    "FilterError",
    "ValidationError",
    "ConfigurationError",
    "MissingColumnsError",
]
