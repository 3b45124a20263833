import json
import logging
import threading
from pathlib import Path
from typing import List

from clients.question_store import QuestionStore, newest_first
from models.models import GeoQuestion

logger = logging.getLogger(__name__)


class LocalQuestionStore(QuestionStore):
    """Keeps every published question in a single JSON file."""

    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> List[GeoQuestion]:
        if not self.path.exists():
            return []
        raw = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        return [GeoQuestion.model_validate(item) for item in raw]

    def _write(self, questions: List[GeoQuestion]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(
            json.dumps([q.model_dump(mode="json") for q in questions], indent=2),
            encoding="utf-8",
        )
        tmp.replace(self.path)

    def add(self, question: GeoQuestion) -> str:
        with self._lock:
            questions = self._read()
            questions.append(question)
            self._write(questions)
        logger.info(f"Stored question {question.id} for @{question.username}")
        return question.id

    def list_recent(self, limit: int = 200) -> List[GeoQuestion]:
        with self._lock:
            questions = self._read()
        return newest_first(questions, limit)

    def list_by_user(self, username: str, limit: int = 200) -> List[GeoQuestion]:
        with self._lock:
            questions = self._read()
        return newest_first([q for q in questions if q.username == username], limit)
