import os
from dataclasses import dataclass

from utils.load_secrets import load_env_vars


@dataclass(frozen=True)
class Settings:
    openai_api_key: str
    openai_model_vision: str
    model_temperature: int
    question_store: str
    local_store_path: str
    aws_region: str
    s3_bucket: str
    s3_prefix: str
    max_upload_mb: int
    thumbnail_max_dim: int
    thumbnail_quality: int
    explore_fetch_limit: int
    explore_result_cap: int
    default_radius_m: int

    def __init__(self):
        load_env_vars()
        object.__setattr__(
            self, "openai_api_key", os.getenv("OPENAI_API_KEY", "").strip()
        )
        object.__setattr__(
            self,
            "openai_model_vision",
            os.getenv("OPENAI_MODEL_VISION", "gpt-4o-mini").strip(),
        )
        object.__setattr__(
            self, "model_temperature", int(os.getenv("MODEL_TEMPERATURE", "1").strip())
        )
        object.__setattr__(
            self, "question_store", os.getenv("QUESTION_STORE", "local").strip().lower()
        )
        object.__setattr__(
            self,
            "local_store_path",
            os.getenv("LOCAL_STORE_PATH", "data/questions.json").strip(),
        )
        object.__setattr__(
            self, "aws_region", os.getenv("AWS_REGION", "eu-west-1").strip()
        )
        object.__setattr__(self, "s3_bucket", os.getenv("S3_BUCKET_NAME", "").strip())
        object.__setattr__(
            self, "s3_prefix", os.getenv("S3_PREFIX", "questions").strip()
        )
        object.__setattr__(
            self, "max_upload_mb", int(os.getenv("MAX_UPLOAD_MB", "20").strip())
        )
        object.__setattr__(
            self, "thumbnail_max_dim", int(os.getenv("THUMBNAIL_MAX_DIM", "300").strip())
        )
        object.__setattr__(
            self, "thumbnail_quality", int(os.getenv("THUMBNAIL_QUALITY", "60").strip())
        )
        object.__setattr__(
            self,
            "explore_fetch_limit",
            int(os.getenv("EXPLORE_FETCH_LIMIT", "200").strip()),
        )
        object.__setattr__(
            self,
            "explore_result_cap",
            int(os.getenv("EXPLORE_RESULT_CAP", "30").strip()),
        )
        object.__setattr__(
            self, "default_radius_m", int(os.getenv("DEFAULT_RADIUS_M", "5000").strip())
        )


SETTINGS = Settings()
