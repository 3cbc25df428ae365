from .core import SplitResult, Splittable, split
from .interval import Interval

__all__ = [
    "Interval",
    "Splittable",
    "SplitResult",
    "split",
]
