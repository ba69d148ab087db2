"""
Расчёт интенсивности упражнений и тренировок.

- classify_exercise: оценка нового упражнения относительно истории пользователя
  (последние подходы или личный рекорд)
- aggregate_workout: общая интенсивность тренировки по упражнениям
- score / from_score: шкала Bad=1 .. Superb=4 и обратное отображение,
  общее для тренировки, недели и статистики
"""
import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from fittrack.core import constants
from fittrack.core.exceptions import InvalidArgument
from fittrack.core.rounding import ensure_non_negative, round_half_up
from fittrack.schemas.workout import Intensity, SetPerformance

logger = logging.getLogger(__name__)

SetLike = Union[SetPerformance, Mapping]
IntensityLike = Union[Intensity, str]


class IntensityCalculator:
    SCORES = constants.INTENSITY_SCORES
    SCORE_THRESHOLDS = constants.SCORE_THRESHOLDS
    PERSONAL_BEST_RATIOS = constants.PERSONAL_BEST_RATIOS

    @staticmethod
    def to_set(item: SetLike) -> SetPerformance:
        if isinstance(item, SetPerformance):
            ensure_non_negative(item.weight, "weight")
            ensure_non_negative(item.reps, "reps")
            return item
        if not isinstance(item, Mapping):
            raise InvalidArgument(f"Ожидался подход {{weight, reps}}, получено {item!r}")

        ensure_non_negative(item.get("weight"), "weight")
        ensure_non_negative(item.get("reps"), "reps")
        try:
            return SetPerformance(weight=item["weight"], reps=item["reps"])
        except ValidationError as e:
            raise InvalidArgument(f"Некорректный подход {item!r}: {e}")

    @classmethod
    def to_sets(cls, items: Optional[Iterable[SetLike]]) -> List[SetPerformance]:
        return [cls.to_set(item) for item in (items or [])]

    @staticmethod
    def to_intensity(value: IntensityLike) -> Intensity:
        try:
            return Intensity(value)
        except ValueError:
            raise InvalidArgument(f"Неизвестный уровень интенсивности: {value!r}")

    @classmethod
    def score(cls, value: IntensityLike) -> int:
        return cls.SCORES[cls.to_intensity(value).value]

    @classmethod
    def from_score(cls, mean_score: float) -> Intensity:
        """Средний балл -> уровень: >=3.5 Superb, >=2.5 Good, >=1.5 Average, иначе Bad."""
        for threshold, level in cls.SCORE_THRESHOLDS:
            if mean_score >= threshold:
                return Intensity(level)
        return Intensity.bad

    @classmethod
    def max_volume_set(cls, sets: Sequence[SetLike]) -> SetPerformance:
        """Подход с максимальным объёмом weight*reps; при равенстве побеждает первый."""
        performances = cls.to_sets(sets)
        if not performances:
            raise InvalidArgument("Нужен хотя бы один подход для оценки упражнения")

        best = performances[0]
        for performance in performances[1:]:
            volume = performance.weight * performance.reps
            best_volume = best.weight * best.reps
            if volume > best_volume:
                best = performance
            elif volume == best_volume:
                logger.debug("Одинаковый объём подходов (%s), оставляем первый", volume)
        return best

    @classmethod
    def recent_average(cls, recent_sets: Sequence[SetLike]) -> Optional[SetPerformance]:
        """Средний вес и округлённое среднее повторений по последним подходам."""
        performances = cls.to_sets(recent_sets)[:constants.RECENT_HISTORY_LIMIT]
        if not performances:
            return None
        count = len(performances)
        return SetPerformance(
            weight=sum(p.weight for p in performances) / count,
            reps=round_half_up(sum(p.reps for p in performances) / count),
        )

    @classmethod
    def _compare_with_personal_best(
            cls,
            current: SetPerformance,
            personal_best: SetPerformance
    ) -> Intensity:
        for ratio, level in cls.PERSONAL_BEST_RATIOS:
            if (current.weight >= personal_best.weight * ratio
                    and current.reps >= personal_best.reps * ratio):
                return Intensity(level)
        return Intensity.bad

    @staticmethod
    def _compare_with_recent(current: SetPerformance, recent_avg: SetPerformance) -> Intensity:
        if current.weight > recent_avg.weight and current.reps >= recent_avg.reps:
            return Intensity.superb
        if current.weight >= recent_avg.weight * constants.RECENT_GOOD_RATIO:
            return Intensity.good
        if current.weight >= recent_avg.weight * constants.RECENT_AVERAGE_RATIO:
            return Intensity.average
        return Intensity.bad

    @classmethod
    def classify_exercise(
            cls,
            current_sets: Sequence[SetLike],
            recent_sets: Optional[Sequence[SetLike]] = None,
            personal_best: Optional[SetLike] = None
    ) -> Intensity:
        """
        Оценить упражнение.

        Порядок сравнения:
        1. Есть последние подходы (до 5, новые первыми) -> сравнение со средним
        2. Нет истории, есть личный рекорд -> пороги 90/80/70% по весу и повторениям
        3. Нет ничего -> Good
        """
        current = cls.max_volume_set(current_sets)
        recent_avg = cls.recent_average(recent_sets or [])

        if recent_avg is None:
            if personal_best is None:
                logger.debug("Нет истории по упражнению, интенсивность по умолчанию Good")
                return Intensity.good
            return cls._compare_with_personal_best(current, cls.to_set(personal_best))

        return cls._compare_with_recent(current, recent_avg)

    @classmethod
    def mean_score(cls, intensities: Sequence[IntensityLike]) -> float:
        if not intensities:
            raise InvalidArgument("Нужно хотя бы одно упражнение для оценки тренировки")
        return sum(cls.score(value) for value in intensities) / len(intensities)

    @classmethod
    def aggregate_workout(cls, intensities: Sequence[IntensityLike]) -> Intensity:
        return cls.from_score(cls.mean_score(intensities))
