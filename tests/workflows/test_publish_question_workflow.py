import pytest
from unittest.mock import MagicMock

from models.models import GeoQuestion, RarityTier
from utils.rarity import RarityRoller
from workflows.publish_question_workflow import PublishQuestionWorkflow


@pytest.fixture
def publish_input(generated_question, jpeg_bytes):
    def _make(**overrides):
        payload = {
            "question": generated_question,
            "subject": "math",
            "difficulty": "middle",
            "rarity": "rare",
            "points": 50,
            "image_bytes": jpeg_bytes(900, 600),
            "location": {"lat": 51.508, "lng": -0.128},
            "username": "alice",
        }
        payload.update(overrides)
        return payload

    return _make


def test_publish_stores_geo_question(publish_input, generated_question):
    store = MagicMock()
    result = PublishQuestionWorkflow(store).run(publish_input())
    store.add.assert_called_once_with(result)
    assert isinstance(result, GeoQuestion)
    assert result.question == generated_question.question
    assert (result.lat, result.lng) == (51.508, -0.128)
    assert result.rarity == "rare"
    assert result.points == 50
    assert result.username == "alice"
    assert result.thumbnail
    assert result.created_at.tzinfo is not None


def test_publish_generates_unique_ids(publish_input):
    wf = PublishQuestionWorkflow(MagicMock())
    assert wf.run(publish_input()).id != wf.run(publish_input()).id


def test_publish_rejects_out_of_range_coordinates(publish_input):
    store = MagicMock()
    with pytest.raises(ValueError, match="Latitude"):
        PublishQuestionWorkflow(store).run(
            publish_input(location={"lat": 95.0, "lng": 0.0})
        )
    store.add.assert_not_called()


def test_publish_rejects_invalid_username(publish_input):
    store = MagicMock()
    with pytest.raises(ValueError):
        PublishQuestionWorkflow(store).run(publish_input(username="no spaces"))
    store.add.assert_not_called()


def test_publish_requires_location(publish_input):
    with pytest.raises(ValueError, match="location"):
        PublishQuestionWorkflow(MagicMock()).run(publish_input(location=None))


def test_publish_rejects_undecodable_image(publish_input):
    store = MagicMock()
    with pytest.raises(ValueError, match="process image"):
        PublishQuestionWorkflow(store).run(publish_input(image_bytes=b"garbage"))
    store.add.assert_not_called()


def test_publish_takes_points_from_rarity_tier(publish_input):
    store = MagicMock()
    result = PublishQuestionWorkflow(store).run(
        publish_input(rarity="common", points=99999)
    )
    assert result.points == 10
    assert store.add.call_args.args[0].points == 10


def test_publish_uses_injected_tier_table(publish_input):
    roller = RarityRoller(
        [RarityTier(id="rare", label="Rare", points=7, weight=1)]
    )
    result = PublishQuestionWorkflow(MagicMock(), rarity_roller=roller).run(
        publish_input(rarity="rare")
    )
    assert result.points == 7


@pytest.mark.parametrize(
    "field,value,message",
    [
        ("subject", "nonsense", "Unknown subject"),
        ("subject", "", "Unknown subject"),
        ("difficulty", "postgrad", "Unknown difficulty"),
    ],
)
def test_publish_rejects_unknown_catalog_values(publish_input, field, value, message):
    store = MagicMock()
    with pytest.raises(ValueError, match=message):
        PublishQuestionWorkflow(store).run(publish_input(**{field: value}))
    store.add.assert_not_called()
