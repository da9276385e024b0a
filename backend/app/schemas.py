from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, StrictInt


class Character(BaseModel):
    id: int
    name: str
    stats: Dict[str, int]


class CharacterCreate(BaseModel):
    name: Optional[str] = None
    stats: Optional[Dict[str, StrictInt]] = None


class CharacterUpdate(BaseModel):
    id: StrictInt = Field(description="Id of the existing character to replace")
    name: Optional[str] = None
    stats: Optional[Dict[str, StrictInt]] = None


class GenerationMessage(BaseModel):
    success: bool = True
    message: str


class GenerationStatus(BaseModel):
    is_generating: bool
    state: Literal["idle", "running"]
    interval_seconds: float


class StatValue(BaseModel):
    name: str
    value: int


class RosterSummary(BaseModel):
    count: int
    average_stats: List[StatValue]
    distribution: List[StatValue]
