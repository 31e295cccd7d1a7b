"""A package for analyzing in-memory gradebooks of student grades."""

import logging

from .core import Gradebook, combine_gradebooks
from .bands import PerformanceBand, DEFAULT_BANDS
from .errors import EmptyDatasetError
from .analytics import GradebookAnalytics, AnalyticsOptions

from . import bands
from . import statistics

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Gradebook",
    "combine_gradebooks",
    "GradebookAnalytics",
    "AnalyticsOptions",
    "PerformanceBand",
    "DEFAULT_BANDS",
    "EmptyDatasetError",
    "bands",
    "statistics",
]
