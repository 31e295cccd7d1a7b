import math

import pandas as pd

import gradestream
from gradestream import _examples
from gradestream.bands import PerformanceBand
from gradestream.statistics import GradeStatistics


def test_summarize():
    # when
    stats = gradestream.statistics.summarize([3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5])

    # then
    assert stats == GradeStatistics(
        count=11, total=44, minimum=1, maximum=9, average=4.0
    )


def test_summarize_without_grades():
    # when
    stats = gradestream.statistics.summarize([])

    # then
    assert stats.count == 0
    assert stats.total == 0
    assert stats.minimum is None
    assert stats.maximum is None
    assert stats.average == 0.0


def test_summary_statistics_of_gradebook():
    # when
    stats = gradestream.statistics.summary_statistics(_examples.classroom())

    # then
    assert stats.count == 15
    assert stats.total == 1210
    assert stats.minimum == 48
    assert stats.maximum == 100
    assert math.isclose(stats.average, 1210 / 15)


def test_averages_keep_gradebook_order_and_include_students_without_grades():
    # given
    gradebook = gradestream.Gradebook({"Bob": [60, 55], "Eva": [], "Anna": [90, 95]})

    # when
    averages = gradestream.statistics.averages(gradebook)

    # then
    assert list(averages.index) == ["Bob", "Eva", "Anna"]
    assert averages.tolist() == [57.5, 0.0, 92.5]
    assert averages.name == "average"


def test_averages_of_empty_gradebook():
    # when
    averages = gradestream.statistics.averages(gradestream.Gradebook())

    # then
    assert averages.empty


def test_band_counts():
    # when
    counts = gradestream.statistics.band_counts(_examples.classroom())

    # then
    assert counts.tolist() == [2, 1, 1, 0, 2]
    assert counts[PerformanceBand.A] == 2
    assert counts[PerformanceBand.D] == 0


def test_band_counts_of_empty_gradebook_are_zero():
    # when
    counts = gradestream.statistics.band_counts(gradestream.Gradebook())

    # then
    assert counts.tolist() == [0, 0, 0, 0, 0]


def test_statistics_by_outcome():
    # given
    gradebook = _examples.classroom()

    # when
    stats = gradestream.statistics.statistics_by_outcome(gradebook, 80)

    # then
    # passing: Anna, Alexandra, Jonathan
    assert stats[True].count == 9
    assert stats[True].total == 275 + 292 + 253
    assert stats[True].maximum == 100
    # failing: Michael, Bob, Eva
    assert stats[False].count == 6
    assert stats[False].minimum == 48


def test_statistics_by_outcome_always_has_both_keys():
    # when
    stats = gradestream.statistics.statistics_by_outcome(
        gradestream.Gradebook({"Anna": [90]}), 50
    )

    # then
    assert stats[True].count == 1
    assert stats[False] == GradeStatistics()


def test_rank_breaks_ties_by_name():
    # given
    averages = pd.Series({"Bob": 80.0, "Anna": 80.0, "Eva": 95.0, "Zed": 10.0})

    # when
    ranks = gradestream.statistics.rank(averages)

    # then
    assert ranks.loc["Eva"] == 1
    assert ranks.loc["Anna"] == 2
    assert ranks.loc["Bob"] == 3
    assert ranks.loc["Zed"] == 4


def test_percentile():
    # given
    averages = pd.Series({"A1": 50.0, "A2": 20.0, "A3": 90.0})

    # when
    percentiles = gradestream.statistics.percentile(averages)

    # then
    assert math.isclose(percentiles.loc["A1"], 2 / 3)
    assert math.isclose(percentiles.loc["A2"], 1 / 3)
    assert math.isclose(percentiles.loc["A3"], 1)


def test_outcomes():
    # when
    outcomes = gradestream.statistics.outcomes(_examples.classroom())

    # then
    assert list(outcomes.index) == [
        "Alexandra",
        "Anna",
        "Jonathan",
        "Michael",
        "Bob",
        "Eva",
    ]
    assert list(outcomes.columns) == ["average", "band", "rank", "percentile"]
    assert outcomes.iloc[0]["rank"] == 1
    assert outcomes.loc["Michael", "band"] == PerformanceBand.C
    assert outcomes.loc["Eva", "average"] == 0.0
