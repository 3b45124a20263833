from models.models import AnswerResult, GeoQuestion


def grade_answer(question: GeoQuestion, selected_index: int) -> AnswerResult:
    if not 0 <= selected_index < len(question.options):
        raise ValueError(
            f"Answer {selected_index} is not one of the {len(question.options)} options."
        )
    correct = selected_index == question.correct_index
    return AnswerResult(
        correct=correct,
        points_awarded=question.points if correct else 0,
        correct_index=question.correct_index,
        explanation=question.explanation,
    )
