from ._gradebook import Gradebook, combine_gradebooks

__all__ = [
    "Gradebook",
    "combine_gradebooks",
]
