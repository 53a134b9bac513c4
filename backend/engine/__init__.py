"""
Projection engine and metrics aggregator, plus the helpers built on them.
"""

from .aggregate import aggregate
from .projection import project

__all__ = ["aggregate", "project"]
