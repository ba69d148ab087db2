from pydantic import BaseModel
from typing import Optional
from enum import Enum

class FitnessGoal(str, Enum):
    gain = "gain"
    lose = "lose"

class GoalsRequest(BaseModel):
    height: float
    weight: float
    goal: FitnessGoal

class GoalsResponse(BaseModel):
    calorie_goal: int
    distance_goal: float
    bmr: Optional[float] = None
