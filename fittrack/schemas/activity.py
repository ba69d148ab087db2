from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from fittrack.schemas.workout import WorkoutRecord

class WeeklyActivity(BaseModel):
    labels: List[str]
    data: List[float]
    days_active: int
    intensity_label: str

class WorkoutStats(BaseModel):
    days_active: int
    avg_intensity: str

class IntensityChartPoint(BaseModel):
    date: str  # "Mar 4"
    score: int
    intensity: str

class WorkoutsSnapshot(BaseModel):
    workouts: List[WorkoutRecord]
    timezone: Optional[str] = None
    reference: Optional[datetime] = None  # неделя, содержащая эту дату

class WorkoutHistoryRequest(BaseModel):
    workouts: List[WorkoutRecord]  # новые первыми
    page: int = 1
    page_size: Optional[int] = None

class WorkoutHistoryPage(BaseModel):
    page: int
    page_size: int
    workouts: List[WorkoutRecord]
    has_more: bool

class WorkoutStatsResponse(BaseModel):
    stats: WorkoutStats
    chart: List[IntensityChartPoint]

class DistanceRequest(BaseModel):
    steps: int
    goal_km: Optional[float] = Field(default=None, gt=0)

class DistanceProgress(BaseModel):
    steps: int
    distance_km: float
    goal_km: float
    ratio: float
    percentage: int

class WeekBounds(BaseModel):
    start: datetime
    end: datetime
