import io
import pytest
from datetime import datetime, timedelta, timezone
from PIL import Image

from models.models import GeneratedQuestion, GeoQuestion
from test_data import TEST_LLM_QUESTION


@pytest.fixture
def generated_question() -> GeneratedQuestion:
    return GeneratedQuestion(**TEST_LLM_QUESTION)


@pytest.fixture
def make_geo_question():
    base_time = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    def _make(
        qid: str,
        lat: float,
        lng: float,
        username: str = "alice",
        minutes_ago: int = 0,
        rarity: str = "common",
        points: int = 10,
    ) -> GeoQuestion:
        return GeoQuestion(
            **TEST_LLM_QUESTION,
            id=qid,
            lat=lat,
            lng=lng,
            subject="math",
            difficulty="middle",
            rarity=rarity,
            points=points,
            username=username,
            created_at=base_time - timedelta(minutes=minutes_ago),
        )

    return _make


@pytest.fixture
def jpeg_bytes():
    def _make(width: int = 800, height: int = 600, mode: str = "RGB") -> bytes:
        buf = io.BytesIO()
        color = (200, 120, 40, 128) if mode == "RGBA" else (200, 120, 40)
        img = Image.new(mode, (width, height), color=color)
        fmt = "PNG" if mode == "RGBA" else "JPEG"
        img.save(buf, format=fmt)
        return buf.getvalue()

    return _make
