import pytest
from unittest.mock import MagicMock

from models.models import RarityTier
from workflows.question_generation_workflow import QuestionGenerationWorkflow
from test_data import TEST_IMAGE_DATA_URL


def _input():
    return {"image_b64": TEST_IMAGE_DATA_URL, "subject": "math", "difficulty": "middle"}


def test_run_generates_question_and_rolls_rarity(generated_question):
    llm_workflow = MagicMock()
    llm_workflow.run.return_value = generated_question
    roller = MagicMock()
    roller.roll.return_value = RarityTier(id="epic", label="Epic", points=100, weight=5)

    result = QuestionGenerationWorkflow(llm_workflow, roller).run(_input())

    llm_workflow.run.assert_called_once_with(_input())
    roller.roll.assert_called_once()
    assert result["question"] == generated_question
    assert result["rarity"] == "epic"
    assert result["points"] == 100


def test_generation_failure_skips_rarity_roll():
    llm_workflow = MagicMock()
    llm_workflow.run.side_effect = ValueError("bad model output")
    roller = MagicMock()
    with pytest.raises(ValueError):
        QuestionGenerationWorkflow(llm_workflow, roller).run(_input())
    roller.roll.assert_not_called()


def test_run_requires_image():
    wf = QuestionGenerationWorkflow(MagicMock(), MagicMock())
    with pytest.raises(ValueError, match="image_b64"):
        wf.run({"subject": "math", "difficulty": "middle"})
