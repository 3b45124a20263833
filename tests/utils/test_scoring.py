import pytest

from utils.scoring import grade_answer


def test_correct_answer_awards_points(make_geo_question):
    q = make_geo_question("q1", 0, 0, rarity="epic", points=100)
    result = grade_answer(q, q.correct_index)
    assert result.correct
    assert result.points_awarded == 100
    assert result.explanation == q.explanation


def test_wrong_answer_awards_nothing(make_geo_question):
    q = make_geo_question("q1", 0, 0, points=10)
    result = grade_answer(q, 0)
    assert not result.correct
    assert result.points_awarded == 0
    assert result.correct_index == 1


@pytest.mark.parametrize("selected", [-1, 4])
def test_out_of_range_answer(make_geo_question, selected):
    q = make_geo_question("q1", 0, 0)
    with pytest.raises(ValueError):
        grade_answer(q, selected)
