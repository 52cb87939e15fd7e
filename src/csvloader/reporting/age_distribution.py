"""
Age-group distribution over stored users.

Buckets (labels kept as shown in the console report):
    <20    age <= 20
    20–40  20 < age <= 40
    40–60  40 < age <= 60
    >60    age > 60

Percentages are rounded half-up independently, so they may not sum to 100.
"""

from csvloader.observability.logger import get_logger
from csvloader.observability.metrics import record_age_distribution
from csvloader.warehouse.base_store import BaseUserStore

logger = get_logger(__name__)

UNDER_20 = "<20"
FROM_20_TO_40 = "20–40"
FROM_40_TO_60 = "40–60"
OVER_60 = ">60"

BUCKET_LABELS = (UNDER_20, FROM_20_TO_40, FROM_40_TO_60, OVER_60)

# Display text per bucket for the console table
DISPLAY_LABELS = {
    UNDER_20: "< 20",
    FROM_20_TO_40: "20 to 40",
    FROM_40_TO_60: "40 to 60",
    OVER_60: "> 60",
}

EMPTY_MESSAGE = "No users found in DB. Upload CSV first."


def bucket_for(age: int) -> str:
    """Return the bucket label for an age."""
    if age <= 20:
        return UNDER_20
    if age <= 40:
        return FROM_20_TO_40
    if age <= 60:
        return FROM_40_TO_60
    return OVER_60


def round_percent(count: int, total: int) -> int:
    """count / total * 100 rounded half-up, using exact integer arithmetic."""
    return (200 * count + total) // (2 * total)


def compute_distribution(ages: list[int]) -> dict[str, int] | None:
    """
    Compute the percentage of ages in each bucket.

    Args:
        ages: Stored age values

    Returns:
        Bucket label -> percentage, in bucket order, or None if there are no ages
    """
    if not ages:
        return None

    counts = {label: 0 for label in BUCKET_LABELS}
    for age in ages:
        counts[bucket_for(age)] += 1

    total = len(ages)
    return {label: round_percent(count, total) for label, count in counts.items()}


def render_distribution(percents: dict[str, int] | None) -> str:
    """
    Format a distribution as a console table.

    Args:
        percents: Output of compute_distribution

    Returns:
        Multi-line string
    """
    if percents is None:
        return EMPTY_MESSAGE

    rule = "═" * 43
    lines = [
        rule,
        "          AGE-GROUP % DISTRIBUTION",
        rule,
        "  AGE GROUP       |    PERCENTAGE (%)",
        "─" * 43,
    ]
    for label in BUCKET_LABELS:
        lines.append(f"  {DISPLAY_LABELS[label]:<16}|    {percents.get(label, 0):>3}%")
    lines.append(rule)
    return "\n".join(lines)


class AgeDistributionReporter:
    """
    Reads ages from a store and reports their bucket distribution.
    """

    def __init__(self, store: BaseUserStore):
        """
        Initialize reporter.

        Args:
            store: Store to read ages from
        """
        self.store = store

    def report(self) -> dict[str, int] | None:
        """
        Compute the current distribution.

        Returns:
            Bucket label -> percentage, or None if the store holds no users
        """
        ages = self.store.read_all_ages()
        percents = compute_distribution(ages)
        if percents is None:
            logger.info("No users found; age distribution is empty")
            return None

        record_age_distribution(percents)
        logger.info(
            "Computed age distribution",
            extra={"total_users": len(ages), "distribution": percents}
        )
        return percents

    def render(self) -> str:
        """Compute and format the distribution."""
        return render_distribution(self.report())
