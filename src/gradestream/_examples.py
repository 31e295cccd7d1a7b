"""Example gradebooks that are used in the documentation and tests."""

import gradestream


def classroom():
    """A small class with students in every band and one without grades."""
    return gradestream.Gradebook(
        {
            "Anna": [92, 88, 95],
            "Michael": [75, 80, 70],
            "Jonathan": [85, 90, 78],
            "Eva": [],
            "Bob": [55, 62, 48],
            "Alexandra": [98, 94, 100],
        }
    )


def with_tie():
    """Two students sharing the highest average."""
    return gradestream.Gradebook({"Bob": [80], "Anna": [80], "Eva": [70, 72]})
