import uuid
import logging
from datetime import datetime, timezone
from typing import Any, Dict
from langchain_core.runnables import RunnableLambda

from clients.question_store import QuestionStore
from config.config import SETTINGS
from models.models import GeoQuestion, PublishInput, PublishPayload
from utils.constants import find_difficulty, find_subject
from utils.image_utils import compress_image
from utils.rarity import RarityRoller
from utils.validation import validate_coordinates, validate_username
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class PublishQuestionWorkflow(Workflow):
    """Pins a generated question to a location and stores it."""

    def __init__(
        self, question_store: QuestionStore, rarity_roller: RarityRoller | None = None
    ):
        self.question_store = question_store
        self.rarity_roller = rarity_roller or RarityRoller()

    def _validate_inputs(self, input: PublishInput) -> PublishInput:
        validate_coordinates(input.location.lat, input.location.lng)
        validate_username(input.username)
        if not find_subject(input.subject):
            raise ValueError(f"Unknown subject: {input.subject}")
        if not find_difficulty(input.difficulty):
            raise ValueError(f"Unknown difficulty: {input.difficulty}")
        return input

    def _compress_thumbnail(self, input: PublishInput) -> PublishPayload:
        thumbnail = compress_image(
            input.image_bytes,
            max_dim=SETTINGS.thumbnail_max_dim,
            quality=SETTINGS.thumbnail_quality,
        )
        return PublishPayload(**input.model_dump(), thumbnail=thumbnail)

    def _build_geo_question(self, input: PublishPayload) -> GeoQuestion:
        return GeoQuestion(
            **input.question.model_dump(),
            id=uuid.uuid4().hex,
            lat=input.location.lat,
            lng=input.location.lng,
            subject=input.subject,
            difficulty=input.difficulty,
            rarity=input.rarity,
            # points always come from the tier table, never from the caller
            points=self.rarity_roller.tier(input.rarity).points,
            thumbnail=input.thumbnail,
            username=input.username,
            created_at=datetime.now(timezone.utc),
        )

    def _store(self, question: GeoQuestion) -> GeoQuestion:
        self.question_store.add(question)
        logger.info(
            f"Published {question.rarity} question {question.id} at "
            f"({question.lat:.5f}, {question.lng:.5f})"
        )
        return question

    def _coerce_input(self, payload: Dict[str, Any]) -> PublishInput:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        for field in ("question", "rarity", "image_bytes", "location", "username"):
            if not payload.get(field):
                raise ValueError(f"{field} is required")
        return PublishInput.model_validate(payload)

    def run(self, input: Dict[str, Any]) -> GeoQuestion:
        chain = (
            RunnableLambda(self._validate_inputs)
            | RunnableLambda(self._compress_thumbnail)
            | RunnableLambda(self._build_geo_question)
            | RunnableLambda(self._store)
        )
        return chain.invoke(input=self._coerce_input(input))
