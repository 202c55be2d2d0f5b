"""Statistics and chart modules."""
from .charts import build_trend_figure
from .stats import BiomarkerStats, compute_stats

__all__ = [
    "BiomarkerStats",
    "compute_stats",
    "build_trend_figure",
]
