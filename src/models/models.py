from datetime import datetime, timezone
from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field, model_validator

RarityId = Literal["common", "uncommon", "rare", "epic", "legendary"]


class RarityTier(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: RarityId
    label: str
    points: int = Field(gt=0)
    weight: float = Field(ge=0)
    color: str = ""
    icon: str = ""


class Location(BaseModel):
    lat: float
    lng: float


class GeneratedQuestion(BaseModel):
    image_analysis: str
    question: str
    options: List[str] = Field(min_length=2, max_length=6)
    correct_index: int
    explanation: str
    hint: str
    learning_objective: str
    why_this_image: str

    @model_validator(mode="after")
    def _check_correct_index(self) -> "GeneratedQuestion":
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"correct_index {self.correct_index} is outside the {len(self.options)} options"
            )
        return self


class LLMQuestionGenerationInput(BaseModel):
    image_b64: str
    subject: str
    difficulty: str


class QuestionState(BaseModel):
    image_b64: str
    subject: str
    difficulty: str
    question: Optional[GeneratedQuestion] = None
    rarity: Optional[RarityId] = None
    points: int = 0


class GeoQuestion(GeneratedQuestion):
    model_config = ConfigDict(frozen=True)
    id: str
    lat: float
    lng: float
    subject: str
    difficulty: str
    rarity: RarityId
    points: int
    thumbnail: str = ""
    username: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ScoredCandidate(GeoQuestion):
    distance_m: float


class PublishInput(BaseModel):
    question: GeneratedQuestion
    subject: str
    difficulty: str
    rarity: RarityId
    image_bytes: bytes
    location: Location
    username: str


class PublishPayload(PublishInput):
    thumbnail: str


class ExploreInput(BaseModel):
    location: Location
    radius_m: float = Field(gt=0)


class AnswerResult(BaseModel):
    correct: bool
    points_awarded: int
    correct_index: int
    explanation: str
