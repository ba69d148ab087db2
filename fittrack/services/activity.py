"""
Недельная активность и статистика тренировок.

Индекс дня недели фиксирован: 0 = воскресенье .. 6 = суббота, независимо от
локали. Для отображения неделя поворачивается так, чтобы начиналась с понедельника.
"""
import logging
from datetime import datetime, timedelta, tzinfo
from typing import List, Optional, Sequence, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fittrack.core import constants
from fittrack.core.exceptions import InvalidArgument
from fittrack.core.rounding import round_half_up
from fittrack.schemas.activity import IntensityChartPoint, WeekBounds, WeeklyActivity, WorkoutStats
from fittrack.schemas.workout import WorkoutRecord
from fittrack.services.intensity import IntensityCalculator

logger = logging.getLogger(__name__)

TimezoneLike = Union[tzinfo, str, None]


def resolve_timezone(tz: TimezoneLike) -> Optional[tzinfo]:
    if tz is None or isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        raise InvalidArgument(f"Неизвестный часовой пояс: {tz!r}")


def to_local(moment: datetime, tz: TimezoneLike = None) -> datetime:
    """Aware-время переводится в tz (или системный пояс), naive считается локальным."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(resolve_timezone(tz))


def sunday_based_weekday(moment: datetime) -> int:
    return (moment.weekday() + 1) % 7


def rotate_left(values: Sequence, steps: int = 1) -> list:
    values = list(values)
    if not values:
        return values
    steps %= len(values)
    return values[steps:] + values[:steps]


def rotate_right(values: Sequence, steps: int = 1) -> list:
    return rotate_left(values, -steps)


class ActivityCalculator:

    @staticmethod
    def week_bounds(reference: datetime) -> WeekBounds:
        """Границы недели: воскресенье 00:00 .. суббота 23:59:59.999999."""
        start = reference - timedelta(days=sunday_based_weekday(reference))
        start = start.replace(hour=0, minute=0, second=0, microsecond=0)
        end = (start + timedelta(days=6)).replace(hour=23, minute=59, second=59, microsecond=999999)
        return WeekBounds(start=start, end=end)

    @classmethod
    def workouts_in_week(
            cls,
            workouts: Sequence[WorkoutRecord],
            reference: datetime,
            tz: TimezoneLike = None
    ) -> List[WorkoutRecord]:
        """Тренировки, попадающие в неделю (вс..сб) с датой reference, по местному времени."""
        bounds = cls.week_bounds(to_local(reference, tz).replace(tzinfo=None))
        return [
            workout for workout in workouts
            if bounds.start <= to_local(workout.created_at, tz).replace(tzinfo=None) <= bounds.end
        ]

    @staticmethod
    def daily_intensities(
            workouts: Sequence[WorkoutRecord],
            tz: TimezoneLike = None
    ) -> List[float]:
        """Средний балл по дням недели (0 = воскресенье), с точностью до 0.1."""
        buckets: List[List[int]] = [[] for _ in range(7)]
        for workout in workouts:
            day_index = sunday_based_weekday(to_local(workout.created_at, tz))
            buckets[day_index].append(IntensityCalculator.score(workout.intensity))

        return [
            round_half_up(sum(scores) / len(scores), 1) if scores else 0.0
            for scores in buckets
        ]

    @classmethod
    def weekly_intensity(
            cls,
            workouts: Sequence[WorkoutRecord],
            tz: TimezoneLike = None
    ) -> WeeklyActivity:
        """График интенсивности за неделю (Mon..Sun) и сводка по активным дням."""
        data = rotate_left(cls.daily_intensities(workouts, tz))

        active_values = [value for value in data if value > 0]
        days_active = len(active_values)
        if days_active == 0:
            label = constants.NO_WORKOUTS_LABEL
        else:
            label = IntensityCalculator.from_score(sum(active_values) / days_active).value

        logger.debug("Недельная активность: %s, активных дней %d", data, days_active)
        return WeeklyActivity(
            labels=list(constants.WEEKDAY_LABELS),
            data=data,
            days_active=days_active,
            intensity_label=label,
        )

    @staticmethod
    def workout_stats(workouts: Sequence[WorkoutRecord], tz: TimezoneLike = None) -> WorkoutStats:
        if not workouts:
            return WorkoutStats(days_active=0, avg_intensity=constants.NO_DATA_LABEL)

        unique_days = {to_local(workout.created_at, tz).date() for workout in workouts}
        mean_score = IntensityCalculator.mean_score([workout.intensity for workout in workouts])
        return WorkoutStats(
            days_active=len(unique_days),
            avg_intensity=IntensityCalculator.from_score(mean_score).value,
        )

    @staticmethod
    def intensity_chart(
            workouts: Sequence[WorkoutRecord],
            tz: TimezoneLike = None
    ) -> List[IntensityChartPoint]:
        """Последние 7 тренировок из переданного списка для столбчатого графика."""
        chart = []
        for workout in list(workouts)[-constants.CHART_WORKOUTS_LIMIT:]:
            local = to_local(workout.created_at, tz)
            intensity = IntensityCalculator.to_intensity(workout.intensity)
            chart.append(IntensityChartPoint(
                date=f"{constants.MONTH_LABELS[local.month - 1]} {local.day}",
                score=IntensityCalculator.score(intensity),
                intensity=intensity.value,
            ))
        return chart
