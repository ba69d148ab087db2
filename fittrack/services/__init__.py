from fittrack.services.intensity import IntensityCalculator
from fittrack.services.activity import ActivityCalculator
from fittrack.services.nutrition_calculator import NutritionCalculator
from fittrack.services.distance import DistanceCalculator
from fittrack.services.exercise import ExerciseCalculator
from fittrack.services.pagination import has_more, page_of, paginate

__all__ = [
    "IntensityCalculator",
    "ActivityCalculator",
    "NutritionCalculator",
    "DistanceCalculator",
    "ExerciseCalculator",
    "paginate",
    "has_more",
    "page_of",
]
