from abc import ABC, abstractmethod
from typing import List

from models.models import GeoQuestion


class QuestionStore(ABC):
    """Persistence for published geo-pinned questions."""

    @abstractmethod
    def add(self, question: GeoQuestion) -> str:
        pass

    @abstractmethod
    def list_recent(self, limit: int = 200) -> List[GeoQuestion]:
        """Most recently published questions, newest first."""
        pass

    @abstractmethod
    def list_by_user(self, username: str, limit: int = 200) -> List[GeoQuestion]:
        pass


def newest_first(questions: List[GeoQuestion], limit: int) -> List[GeoQuestion]:
    return sorted(questions, key=lambda q: q.created_at, reverse=True)[:limit]
