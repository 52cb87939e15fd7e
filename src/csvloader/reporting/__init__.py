"""
Reports over stored users.
"""

from .age_distribution import (
    BUCKET_LABELS,
    AgeDistributionReporter,
    compute_distribution,
    render_distribution,
)

__all__ = [
    "AgeDistributionReporter",
    "BUCKET_LABELS",
    "compute_distribution",
    "render_distribution",
]
