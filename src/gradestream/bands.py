"""Mapping average grades to performance bands."""

import collections
import enum
from typing import Mapping, Optional

import pandas as pd


class PerformanceBand(str, enum.Enum):
    """A category of performance derived from a student's average grade.

    Members compare equal to their letter, so ``PerformanceBand.A == "A"``.

    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    def __str__(self):
        return self.value


# helper functions =====================================================================


def _check_that_scale_monotonically_decreases(bands):
    prev = float("inf")
    for threshold in bands.values():
        if threshold >= prev:
            raise ValueError("Band thresholds are not monotonically decreasing.")
        prev = threshold


def _resolve_bands(bands):
    """Return the default bands if `bands` is None, otherwise validate them."""
    if bands is None:
        return DEFAULT_BANDS

    if list(bands) != list(DEFAULT_BANDS):
        raise ValueError(
            f"Scale has invalid bands. Must be exactly {[str(b) for b in DEFAULT_BANDS]}."
        )
    _check_that_scale_monotonically_decreases(bands)
    return bands


# common scales ========================================================================

DEFAULT_BANDS = collections.OrderedDict(
    [
        (PerformanceBand.A, 90),
        (PerformanceBand.B, 80),
        (PerformanceBand.C, 70),
        (PerformanceBand.D, 60),
        (PerformanceBand.F, 0),
    ]
)
"""The default scale, mapping each band to the lowest average it contains."""


# public functions =====================================================================


def validate_bands(bands: Mapping[PerformanceBand, float]):
    """Check that a scale lists every band, in order, with decreasing thresholds.

    Raises
    ------
    ValueError
        If the scale is invalid.

    """
    _resolve_bands(bands)


def band_for_average(
    average: float, bands: Optional[Mapping[PerformanceBand, float]] = None
) -> PerformanceBand:
    """Find the band that an average grade falls in.

    Parameters
    ----------
    average : float
        An average grade between 0 and 100.
    bands : Optional[Mapping[PerformanceBand, float]]
        An ordered mapping from band to its lower threshold.
        Default: :attr:`DEFAULT_BANDS`.

    Returns
    -------
    PerformanceBand
        The first band whose threshold is at most `average`; ``F`` if there is
        none.

    Raises
    ------
    ValueError
        If the provided scale is invalid.

    """
    bands = _resolve_bands(bands)
    for band, threshold in bands.items():
        if average >= threshold:
            return band
    else:
        return PerformanceBand.F


def map_averages_to_bands(
    averages: pd.Series, bands: Optional[Mapping[PerformanceBand, float]] = None
) -> pd.Series:
    """Map each average grade to a performance band.

    Parameters
    ----------
    averages : pandas.Series
        A series containing averages as floats between 0 and 100.
    bands : Optional[Mapping[PerformanceBand, float]]
        Default: :attr:`DEFAULT_BANDS`.

    Returns
    -------
    pandas.Series
        A series of :class:`PerformanceBand` members with the same index.

    """
    bands = _resolve_bands(bands)
    result = pd.Series(
        [band_for_average(average, bands) for average in averages],
        index=averages.index,
        dtype=object,
    )
    result.name = "band"
    return result
