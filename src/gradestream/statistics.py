"""Summary statistics of a gradebook."""

import dataclasses
import logging
from typing import Iterable, Mapping, Optional

import numpy as np
import pandas as pd

from .bands import PerformanceBand, map_averages_to_bands
from .core import Gradebook
from ._util import ensure_series

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class GradeStatistics:
    """Count, total, minimum, maximum, and average of a collection of grades.

    Attributes
    ----------
    count : int
        The number of grades.
    total : int
        The sum of the grades.
    minimum : Optional[int]
        The smallest grade, or None if there are no grades.
    maximum : Optional[int]
        The largest grade, or None if there are no grades.
    average : float
        The mean of the grades, or 0.0 if there are no grades.

    """

    count: int = 0
    total: int = 0
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    average: float = 0.0


def summarize(grades: Iterable[int]) -> GradeStatistics:
    """Compute the summary statistics of a collection of grades.

    Parameters
    ----------
    grades : Iterable[int]
        The grades to summarize.

    Returns
    -------
    GradeStatistics

    """
    values = np.fromiter(grades, dtype=np.int64)
    if values.size == 0:
        return GradeStatistics()

    total = int(values.sum())
    return GradeStatistics(
        count=int(values.size),
        total=total,
        minimum=int(values.min()),
        maximum=int(values.max()),
        average=total / values.size,
    )


def averages(gradebook: Gradebook) -> pd.Series:
    """The average grade of every student.

    Parameters
    ----------
    gradebook : Gradebook
        The gradebook whose averages are computed.

    Returns
    -------
    pd.Series
        A series indexed by student name, in the gradebook's order. A student
        without grades has an average of 0.0.

    """
    names = list(gradebook.students)
    grouped = gradebook.grades.groupby(level=0)

    totals = grouped.sum().reindex(names, fill_value=0)
    counts = grouped.count().reindex(names, fill_value=0)

    # students without grades divide by NaN and are then filled with 0.0
    result = ensure_series((totals / counts.where(counts > 0)).fillna(0.0))
    result = result.astype(float)
    result.index.name = "student"
    result.name = "average"
    return result


def summary_statistics(gradebook: Gradebook) -> GradeStatistics:
    """Summary statistics over every grade in the gradebook."""
    return summarize(gradebook.grades)


def band_counts(
    gradebook: Gradebook, bands: Optional[Mapping[PerformanceBand, float]] = None
) -> pd.Series:
    """Counts the number of students in each performance band.

    Parameters
    ----------
    gradebook : Gradebook
        The gradebook to summarize.
    bands : Optional[Mapping[PerformanceBand, float]]
        The scale used to assign bands. Default: :attr:`bands.DEFAULT_BANDS`.

    Returns
    -------
    pd.Series
        The count of each band. The bands are guaranteed to be in order, from
        highest to lowest, and bands without students have a count of zero.

    """
    student_bands = map_averages_to_bands(averages(gradebook), bands)
    counts = student_bands.value_counts().reindex(
        pd.Index(list(PerformanceBand), dtype=object)
    )
    counts.index.name = "band"
    counts.name = "students"
    return counts.fillna(0).astype(int)


def statistics_by_outcome(
    gradebook: Gradebook, threshold: float
) -> dict[bool, GradeStatistics]:
    """Summary statistics of the grades of passing and failing students.

    A student passes if their average is at least `threshold`.

    Parameters
    ----------
    gradebook : Gradebook
        The gradebook to summarize.
    threshold : float
        The lowest passing average.

    Returns
    -------
    dict[bool, GradeStatistics]
        ``True`` maps to the statistics of all grades earned by passing
        students, ``False`` to those of failing students. Both keys are
        always present.

    """
    student_averages = averages(gradebook)
    passing = (student_averages >= threshold).to_numpy()
    passing_names = set(student_averages.index[passing])

    grades = gradebook.grades
    mask = grades.index.isin(list(passing_names))

    logger.debug(
        "Partitioned %d students at threshold %s: %d passing.",
        len(student_averages),
        threshold,
        len(passing_names),
    )

    return {
        True: summarize(grades[mask]),
        False: summarize(grades[~mask]),
    }


def rank(averages: pd.Series) -> pd.Series:
    """The rank of each student according to average.

    Students with equal averages are ranked in alphabetical order of name.

    Parameters
    ----------
    averages : pd.Series
        A series containing averages, indexed by student name.

    Returns
    -------
    pd.Series
        A Series of the same size as `averages` containing the integer rank of
        each student, starting at 1, in order of rank.

    """
    order = sorted(averages.index, key=lambda name: (-averages[name], name))
    return pd.Series(
        np.arange(1, len(order) + 1),
        index=pd.Index(order, dtype=object, name=averages.index.name),
        name="rank",
    )


def percentile(averages: pd.Series) -> pd.Series:
    """The percentile of each student according to average.

    Parameters
    ----------
    averages : pd.Series
        The averages used to compute the percentile.

    Returns
    -------
    pd.Series
        A Series of the same size as `averages` in which each entry is the
        student's percentile in the class, as a number between 0 and 1.

    """
    ranks = rank(averages)
    s = 1 - ((ranks - 1) / len(ranks))
    s.name = "percentile"
    return s


def outcomes(
    gradebook: Gradebook, bands: Optional[Mapping[PerformanceBand, float]] = None
) -> pd.DataFrame:
    """Compute a table summarizing student outcomes.

    Parameters
    ----------
    gradebook : Gradebook
        The gradebook used to compute outcomes.
    bands : Optional[Mapping[PerformanceBand, float]]
        The scale used to assign bands. Default: :attr:`bands.DEFAULT_BANDS`.

    Returns
    -------
    pd.DataFrame
        A table with one row per student and columns for the average, band,
        rank, and percentile. Sorted by rank, from first to last.

    """
    student_averages = averages(gradebook)
    table = pd.DataFrame(
        {
            "average": student_averages,
            "band": map_averages_to_bands(student_averages, bands),
            "rank": rank(student_averages),
            "percentile": percentile(student_averages),
        }
    )
    return table.sort_values(by="rank")
