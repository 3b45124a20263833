import logging
from typing import Any, Dict
from langgraph.graph import StateGraph, START, END
from models.models import QuestionState
from utils.rarity import RarityRoller
from workflows.workflow import Workflow
from workflows.llm_question_generation_workflow import LLMQuestionGenerationWorkflow

logger = logging.getLogger(__name__)


class QuestionGenerationWorkflow(Workflow):
    """Image -> multiple-choice question -> rarity tier."""

    def __init__(
        self,
        llm_question_generation_workflow: LLMQuestionGenerationWorkflow,
        rarity_roller: RarityRoller,
    ) -> None:
        self.llm_question_generation_workflow = llm_question_generation_workflow
        self.rarity_roller = rarity_roller
        self.graph = self._build_graph()

    def _build_graph(self):
        graph = StateGraph(QuestionState)
        graph.add_node("generate_question", self._generate_question)
        graph.add_node("roll_rarity", self._roll_rarity)
        graph.add_edge(START, "generate_question")
        graph.add_edge("generate_question", "roll_rarity")
        graph.add_edge("roll_rarity", END)
        return graph.compile()

    def _coerce_input(self, payload: Dict[str, Any]) -> QuestionState:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        image_b64 = payload.get("image_b64")
        subject = payload.get("subject")
        difficulty = payload.get("difficulty")
        if not image_b64:
            raise ValueError("image_b64 is required")
        if not subject:
            raise ValueError("subject is required")
        if not difficulty:
            raise ValueError("difficulty is required")
        return QuestionState(image_b64=image_b64, subject=subject, difficulty=difficulty)

    def _generate_question(self, state: QuestionState) -> Dict[str, Any]:
        logger.info(f"Generating {state.difficulty} {state.subject} question")
        question = self.llm_question_generation_workflow.run(
            {
                "image_b64": state.image_b64,
                "subject": state.subject,
                "difficulty": state.difficulty,
            }
        )
        return {"question": question}

    def _roll_rarity(self, state: QuestionState) -> Dict[str, Any]:
        tier = self.rarity_roller.roll()
        return {"rarity": tier.id, "points": tier.points}

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        return self.graph.invoke(input=self._coerce_input(input))
