"""Pure helpers shaping metric records for charts and history tables.

None of these touch the database or mutate their input.
"""

from collections import OrderedDict
from typing import Dict, Iterable, List

from app.models.metric import UserMetric
from app.schemas.metric import MetricPoint, MetricSeries


def sort_for_chart(metrics: Iterable[UserMetric]) -> List[UserMetric]:
    """Oldest measurement first."""
    return sorted(metrics, key=lambda metric: metric.recorded_at)


def sort_for_history(metrics: Iterable[UserMetric]) -> List[UserMetric]:
    """Newest measurement first."""
    return sorted(metrics, key=lambda metric: metric.recorded_at, reverse=True)


def group_by_key(metrics: Iterable[UserMetric]) -> Dict[str, List[UserMetric]]:
    """Split metrics per key, keeping the first-seen key order."""
    groups: Dict[str, List[UserMetric]] = OrderedDict()
    for metric in metrics:
        key = metric.key.value if hasattr(metric.key, "value") else metric.key
        groups.setdefault(key, []).append(metric)
    return groups


def build_series(metrics: Iterable[UserMetric]) -> List[MetricSeries]:
    """Chart series per key, each ordered oldest first."""
    series = []
    for key, group in group_by_key(metrics).items():
        points = [
            MetricPoint(recorded_at=metric.recorded_at, value=metric.value, unit=metric.unit)
            for metric in sort_for_chart(group)
        ]
        series.append(
            MetricSeries(
                key=key,
                points=points,
                latest=points[-1],
                change=round(points[-1].value - points[0].value, 2),
            )
        )
    return series
