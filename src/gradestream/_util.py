"""Private helper utilities."""

from typing import Iterable

import pandas as pd

def sorted_names(names: Iterable) -> list[str]:
    """Return the names as a plain list of strings in ascending order."""
    return sorted(str(name) for name in names)


def ensure_series(x) -> pd.Series:
    """Helps convince the type checker that a variable is a Series."""
    assert isinstance(x, pd.Series)
    return x
