from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime
from enum import Enum

class Intensity(str, Enum):
    bad = "Bad"
    average = "Average"
    good = "Good"
    superb = "Superb"

class SetPerformance(BaseModel):
    weight: float
    reps: int

class WorkoutRecord(BaseModel):
    id: Optional[int] = None
    user_id: Optional[str] = None
    name: str = "Workout"
    intensity: Intensity
    created_at: datetime

class ExerciseSet(BaseModel):
    workout_id: Optional[int] = None
    exercise_name: str
    set_number: int = Field(ge=1)
    weight: float
    reps: int
    intensity: Optional[Intensity] = None

class ExerciseInput(BaseModel):
    exercise_name: str
    sets: List[SetPerformance]
    recent_sets: List[SetPerformance] = []

class ClassifiedExercise(BaseModel):
    exercise_name: str
    sets: List[SetPerformance]
    intensity: Intensity
    total_volume: float

class ExerciseIntensityRequest(BaseModel):
    current_sets: List[SetPerformance]
    recent_sets: List[SetPerformance] = []
    personal_best: Optional[SetPerformance] = None

class ExerciseIntensityResponse(BaseModel):
    intensity: Intensity
    current_performance: SetPerformance
    recent_average: Optional[SetPerformance] = None

class WorkoutIntensityRequest(BaseModel):
    intensities: List[Intensity]

class WorkoutIntensityResponse(BaseModel):
    intensity: Intensity
    mean_score: float

class LogWorkoutRequest(BaseModel):
    name: str = "Workout"
    exercises: List[ExerciseInput]
    personal_bests: Optional[Dict[str, SetPerformance]] = None

class LogWorkoutResponse(BaseModel):
    name: str
    intensity: Intensity
    exercises: List[ClassifiedExercise]
    sets: List[ExerciseSet]

class ExerciseSetGroup(BaseModel):
    exercise_name: str
    intensity: Optional[Intensity] = None
    sets: List[ExerciseSet]

class WorkoutDetailsRequest(BaseModel):
    sets: List[ExerciseSet]

class WorkoutDetailsResponse(BaseModel):
    exercises: List[ExerciseSetGroup]
