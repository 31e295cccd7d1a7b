"""A type for holding the grades earned by a collection of students."""

import collections.abc
import logging
import numbers
from typing import Collection, Iterator, Mapping, Optional, Sequence

import pandas as pd

logger = logging.getLogger(__name__)

MIN_GRADE = 0
MAX_GRADE = 100


# private helper functions =============================================================


def _validate_name(name) -> str:
    """Check that a student name is a non-empty string."""
    if not isinstance(name, str):
        raise TypeError(f"Student names must be strings, not {type(name).__name__}.")
    if not name:
        raise ValueError("Student names must be non-empty.")
    return name


def _validate_grade(name: str, grade) -> int:
    """Check that a grade is an integer in the allowed range and return it as an int."""
    if isinstance(grade, bool) or not isinstance(grade, numbers.Integral):
        raise TypeError(f'Grade {grade!r} of "{name}" is not an integer.')
    if not MIN_GRADE <= grade <= MAX_GRADE:
        raise ValueError(
            f'Grade {grade} of "{name}" is not between {MIN_GRADE} and {MAX_GRADE}.'
        )
    return int(grade)


# public functions =====================================================================


def combine_gradebooks(gradebooks: Collection["Gradebook"]) -> "Gradebook":
    """Create a new :class:`Gradebook` by safely combining existing gradebooks.

    A student cannot appear in more than one of the gradebooks being combined.

    Parameters
    ----------
    gradebooks : Collection[Gradebook]
        The gradebooks to combine.

    Returns
    -------
    Gradebook
        A gradebook containing every student of every input gradebook.

    Raises
    ------
    ValueError
        If a student appears in more than one gradebook.

    """
    number_of_students = sum(len(g) for g in gradebooks)
    unique_students = set()
    for gradebook in gradebooks:
        unique_students.update(gradebook)

    if len(unique_students) != number_of_students:
        raise ValueError("Gradebooks have duplicate students.")

    combined = {}
    for gradebook in gradebooks:
        combined.update(gradebook.items())

    return Gradebook(combined)


# public classes =======================================================================


class Gradebook(collections.abc.Mapping):
    """Data structure which maps each student to the grades they earned.

    A gradebook is read-only: the grades are validated and copied when it is
    created and cannot be changed afterwards. It behaves like a mapping from
    student name to a tuple of grades.

    Parameters
    ----------
    grades : Mapping[str, Sequence[int]]
        A mapping from student name to the student's grades, in order. Each
        name must be a non-empty string and each grade an integer between 0
        and 100. A student may have no grades. Default: an empty gradebook.

    Raises
    ------
    TypeError
        If ``grades`` is not a mapping, a name is not a string, or a grade is
        not an integer.
    ValueError
        If a name is empty or a grade is out of range.

    Example
    -------
    >>> gradebook = Gradebook({"Anna": [90, 95], "Eva": []})
    >>> gradebook["Anna"]
    (90, 95)
    >>> len(gradebook)
    2

    """

    def __init__(self, grades: Optional[Mapping[str, Sequence[int]]] = None):
        if grades is None:
            grades = {}

        if not isinstance(grades, collections.abc.Mapping):
            raise TypeError("Grades must be provided as a mapping of name to grades.")

        self._grades: dict[str, tuple[int, ...]] = {}
        for name, student_grades in grades.items():
            name = _validate_name(name)
            self._grades[name] = tuple(
                _validate_grade(name, grade) for grade in student_grades
            )

        logger.debug(
            "Created gradebook with %d students and %d grades.",
            len(self._grades),
            sum(len(g) for g in self._grades.values()),
        )

    @classmethod
    def from_series(
        cls, series: pd.Series, students: Optional[Collection[str]] = None
    ) -> "Gradebook":
        """Create a gradebook from a long-form series of grades.

        Parameters
        ----------
        series : pd.Series
            A series with one entry per grade, indexed by student name, such as
            the one returned by :attr:`grades`. The order of a student's grades
            is the order in which they appear in the series.
        students : Optional[Collection[str]]
            Students to include even if they have no grades in the series.
            Default: None.

        Returns
        -------
        Gradebook

        """
        grades: dict[str, list] = {}
        if students is not None:
            grades.update((name, []) for name in students)

        for name, grade in series.items():
            grades.setdefault(name, []).append(grade)

        return cls(grades)

    def __getitem__(self, name: str) -> tuple[int, ...]:
        return self._grades[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._grades)

    def __len__(self) -> int:
        return len(self._grades)

    def __repr__(self):
        return f"Gradebook({self._grades!r})"

    @property
    def students(self) -> tuple[str, ...]:
        """The names of all students in the gradebook, in insertion order."""
        return tuple(self._grades)

    @property
    def grades(self) -> pd.Series:
        """A long-form series with one entry per grade, indexed by student.

        Students without grades do not appear. A new series is created on each
        access, so modifying it does not affect the gradebook.

        """
        names = [name for name, grades in self._grades.items() for _ in grades]
        values = [grade for grades in self._grades.values() for grade in grades]
        return pd.Series(
            values,
            index=pd.Index(names, dtype=object, name="student"),
            dtype="int64",
            name="grade",
        )

    def restrict_to_students(self, to: Collection[str]) -> "Gradebook":
        """Create a new gradebook containing only the given students.

        Parameters
        ----------
        to : Collection[str]
            The names of the students to keep.

        Returns
        -------
        Gradebook

        Raises
        ------
        KeyError
            If a student was not in the gradebook.

        """
        extras = set(to) - set(self._grades)
        if extras:
            raise KeyError(f"These students were not in the gradebook: {extras}.")

        return Gradebook({name: self._grades[name] for name in to})
