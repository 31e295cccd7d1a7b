"""Queries over a read-only gradebook."""

import dataclasses
import logging
import math
import numbers
from typing import Mapping, Optional, Sequence, Union

from . import statistics as _statistics
from .bands import (
    DEFAULT_BANDS,
    PerformanceBand,
    band_for_average,
    map_averages_to_bands,
    validate_bands,
)
from .core import Gradebook
from .errors import EmptyDatasetError
from ._util import sorted_names

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class AnalyticsOptions:
    """Configures the behavior of :class:`GradebookAnalytics`.

    Attributes
    ----------
    passing_threshold : float
        The lowest average that counts as passing when no threshold is given
        to :meth:`GradebookAnalytics.passing_students` and friends. Must be
        between 0 and 100. Default: 60, the boundary between D and F.
    bands : Mapping[PerformanceBand, float]
        The scale used to assign performance bands.
        Default: :attr:`bands.DEFAULT_BANDS`.

    """

    passing_threshold: float = 60.0
    bands: Mapping[PerformanceBand, float] = dataclasses.field(
        default_factory=lambda: DEFAULT_BANDS.copy()
    )

    def __post_init__(self):
        threshold = self.passing_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, numbers.Real):
            raise ValueError("Passing threshold must be a number.")
        if not math.isfinite(threshold) or not 0 <= threshold <= 100:
            raise ValueError("Passing threshold must be between 0 and 100.")
        validate_bands(self.bands)


class GradebookAnalytics:
    """Aggregate queries, filters, and groupings over a gradebook.

    Every query is a pure function of the gradebook: nothing is cached and the
    gradebook is never modified, so calling a query twice returns equal
    results.

    Parameters
    ----------
    gradebook : Union[Gradebook, Mapping[str, Sequence[int]]]
        The grades to analyze. A plain mapping is first converted into a
        :class:`Gradebook`, which validates it.
    options : Optional[AnalyticsOptions]
        Default: ``AnalyticsOptions()``.

    Example
    -------
    >>> analytics = GradebookAnalytics({"Anna": [90, 95], "Bob": [60, 55]})
    >>> analytics.average_for("Anna")
    92.5
    >>> analytics.passing_students(70)
    ['Anna']

    """

    def __init__(
        self,
        gradebook: Union[Gradebook, Mapping[str, Sequence[int]]],
        options: Optional[AnalyticsOptions] = None,
    ):
        if not isinstance(gradebook, Gradebook):
            gradebook = Gradebook(gradebook)

        if options is None:
            options = AnalyticsOptions()

        self.gradebook = gradebook
        self.options = options

    def __repr__(self):
        return f"GradebookAnalytics({self.gradebook!r})"

    # students -------------------------------------------------------------------------

    def all_student_names(self) -> list[str]:
        """The names of all students, sorted in ascending order."""
        return sorted_names(self.gradebook.students)

    def student_count(self) -> int:
        """The number of students."""
        return len(self.gradebook)

    def grades_for(self, name: str) -> list[int]:
        """The grades of a student in their original order.

        An unknown student has no grades; this is not an error.

        """
        return list(self.gradebook.get(name, ()))

    def average_for(self, name: str) -> float:
        """The average grade of a student.

        Returns 0.0 if the student has no grades or is not in the gradebook.

        """
        grades = self.grades_for(name)
        if not grades:
            return 0.0
        return sum(grades) / len(grades)

    def band_for(self, name: str) -> PerformanceBand:
        """The performance band of a student's average."""
        return band_for_average(self.average_for(name), self.options.bands)

    # grades ---------------------------------------------------------------------------

    def all_grades_flattened(self) -> list[int]:
        """Every grade of every student, sorted in ascending order."""
        return np.sort(self.gradebook.grades.to_numpy()).tolist()

    def total_grade_count(self) -> int:
        """The number of grades across all students."""
        return len(self.gradebook.grades)

    def highest_grade(self) -> int:
        """The largest single grade across all students.

        Raises
        ------
        EmptyDatasetError
            If there are no grades.

        """
        grades = self.gradebook.grades
        if grades.empty:
            raise EmptyDatasetError("highest grade")
        return int(grades.max())

    def lowest_grade(self) -> int:
        """The smallest single grade across all students.

        Raises
        ------
        EmptyDatasetError
            If there are no grades.

        """
        grades = self.gradebook.grades
        if grades.empty:
            raise EmptyDatasetError("lowest grade")
        return int(grades.min())

    # averages -------------------------------------------------------------------------

    def student_averages(self) -> dict[str, float]:
        """The average grade of every student, keyed by name."""
        return {
            str(name): float(average)
            for name, average in _statistics.averages(self.gradebook).items()
        }

    def _threshold(self, threshold: Optional[float]) -> float:
        if threshold is None:
            return self.options.passing_threshold
        return threshold

    def _is_passing(self, threshold: Optional[float]) -> pd.Series:
        """Boolean series indexed by student, True where the average passes."""
        averages = _statistics.averages(self.gradebook)
        return averages >= self._threshold(threshold)

    def passing_students(self, threshold: Optional[float] = None) -> list[str]:
        """Names of the students whose average is at least `threshold`.

        Parameters
        ----------
        threshold : Optional[float]
            The lowest passing average. Default: the configured
            ``passing_threshold``.

        Returns
        -------
        list[str]
            The names, sorted in ascending order.

        """
        is_passing = self._is_passing(threshold)
        return sorted_names(is_passing.index[is_passing.to_numpy()])

    def failing_students(self, threshold: Optional[float] = None) -> list[str]:
        """Names of the students whose average is below `threshold`.

        This is always the complement of :meth:`passing_students`, so students
        without grades fail unless the threshold is at most zero.

        """
        is_passing = self._is_passing(threshold)
        return sorted_names(is_passing.index[~is_passing.to_numpy()])

    def group_by_performance(self) -> dict[PerformanceBand, list[str]]:
        """Group the students by the performance band of their average.

        Returns
        -------
        dict[PerformanceBand, list[str]]
            Every band maps to the sorted names of its students; a band with
            no students maps to an empty list. Each student appears in
            exactly one band.

        """
        student_bands = map_averages_to_bands(
            _statistics.averages(self.gradebook), self.options.bands
        )

        groups: dict[PerformanceBand, list[str]] = {b: [] for b in PerformanceBand}
        for name, band in student_bands.items():
            groups[PerformanceBand(band)].append(str(name))

        return {band: sorted(names) for band, names in groups.items()}

    def top_performer(self) -> str:
        """The student with the highest average.

        If several students share the highest average, the one whose name
        comes first alphabetically is returned.

        Raises
        ------
        EmptyDatasetError
            If there are no students.

        """
        if not len(self.gradebook):
            raise EmptyDatasetError("top performer")

        averages = _statistics.averages(self.gradebook)
        best = averages.max()
        leaders = sorted_names(averages.index[(averages == best).to_numpy()])

        logger.debug("Top average %s shared by %d students.", best, len(leaders))
        return leaders[0]

    # statistics -----------------------------------------------------------------------

    def summary_statistics(self) -> _statistics.GradeStatistics:
        """Count, total, minimum, maximum, and average over all grades."""
        return _statistics.summary_statistics(self.gradebook)

    def band_counts(self) -> pd.Series:
        """The number of students in each performance band."""
        return _statistics.band_counts(self.gradebook, self.options.bands)

    def statistics_by_outcome(
        self, threshold: Optional[float] = None
    ) -> dict[bool, _statistics.GradeStatistics]:
        """Summary statistics of the grades of passing and failing students."""
        return _statistics.statistics_by_outcome(
            self.gradebook, self._threshold(threshold)
        )
