from abc import ABC, abstractmethod
from typing import Any, Dict


class Workflow(ABC):
    """One user-triggered operation: a raw dict in, a validated model out."""

    @abstractmethod
    def _coerce_input(self, payload: Dict[str, Any]) -> Any:
        """Reject a malformed payload with ValueError before any work starts."""

    @abstractmethod
    def run(self, input: Dict[str, Any]) -> Any:
        pass
