"""
Пороговые константы расчёта интенсивности и активности.

Все копии порогов собраны здесь: классификатор упражнений, агрегатор
тренировки и недельная статистика читают их из одного места.
"""

# Шкала интенсивности: Bad=1 .. Superb=4
INTENSITY_SCORES = {
    "Bad": 1,
    "Average": 2,
    "Good": 3,
    "Superb": 4,
}

# Обратное отображение среднего балла в уровень (по убыванию)
SCORE_THRESHOLDS = (
    (3.5, "Superb"),
    (2.5, "Good"),
    (1.5, "Average"),
)

# Сравнение с личным рекордом: и вес, и повторения должны пройти порог
PERSONAL_BEST_RATIOS = (
    (0.9, "Superb"),
    (0.8, "Good"),
    (0.7, "Average"),
)

# Сравнение со средним последних подходов (только по весу)
RECENT_GOOD_RATIO = 0.95
RECENT_AVERAGE_RATIO = 0.90

RECENT_HISTORY_LIMIT = 5

# Шаги -> километры
STRIDE_LENGTH_M = 0.762
STEPS_PER_KM = 1312

# Расчёт цели по калориям (Миффлин-Сан Жеор, возраст фиксирован)
DEFAULT_AGE = 25
ACTIVITY_FACTOR = 1.375
CALORIE_ADJUSTMENT = 500

DISTANCE_GOAL_PER_KG = 0.033
MIN_DISTANCE_GOAL_KM = 3

HEIGHT_RANGE_CM = (100, 250)
WEIGHT_RANGE_KG = (30, 250)

WEEKDAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
NO_WORKOUTS_LABEL = "No workouts"
NO_DATA_LABEL = "N/A"
CHART_WORKOUTS_LIMIT = 7
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
