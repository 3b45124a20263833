import logging
from typing import Any, Dict, List

from clients.question_store import QuestionStore
from config.config import SETTINGS
from models.models import ExploreInput, ScoredCandidate
from utils.geo import filter_nearby
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class ExploreWorkflow(Workflow):
    """Nearby published questions for an observer who has a known location."""

    def __init__(
        self,
        question_store: QuestionStore,
        fetch_limit: int | None = None,
        result_cap: int | None = None,
    ):
        self.question_store = question_store
        self.fetch_limit = fetch_limit or SETTINGS.explore_fetch_limit
        self.result_cap = result_cap or SETTINGS.explore_result_cap

    def _coerce_input(self, payload: Dict[str, Any]) -> ExploreInput:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        if not payload.get("location"):
            raise ValueError("location is required")
        if not payload.get("radius_m"):
            raise ValueError("radius_m is required")
        return ExploreInput.model_validate(payload)

    def run(self, input: Dict[str, Any]) -> List[ScoredCandidate]:
        explore_input = self._coerce_input(input)
        # TODO: replace the full scan with a geohash-prefix query once the store supports one
        candidates = self.question_store.list_recent(self.fetch_limit)
        nearby = filter_nearby(
            explore_input.location.lat,
            explore_input.location.lng,
            candidates,
            radius_m=explore_input.radius_m,
            cap=self.result_cap,
        )
        logger.info(
            f"{len(nearby)} of {len(candidates)} questions within {explore_input.radius_m:.0f}m"
        )
        return nearby
