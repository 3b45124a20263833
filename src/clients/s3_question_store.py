import io
import json
import logging
import boto3
from typing import List
from botocore.client import Config
from botocore.exceptions import ClientError

from clients.question_store import QuestionStore, newest_first
from config.config import SETTINGS
from models.models import GeoQuestion
from utils.s3_utils import make_question_key, make_user_prefix

logger = logging.getLogger(__name__)


class S3QuestionStore(QuestionStore):
    """One JSON object per question under ``<prefix>/<user>/<id>.json``."""

    def __init__(self, bucket: str | None = None, prefix: str | None = None, s3=None):
        self.bucket = bucket or SETTINGS.s3_bucket
        assert self.bucket, "S3 bucket not found."
        self.prefix = (prefix or SETTINGS.s3_prefix).strip("/")
        self.s3 = s3 or self._get_s3_client()

    def _get_s3_client(self):
        return boto3.client(
            "s3",
            region_name=SETTINGS.aws_region,
            config=Config(s3={"addressing_style": "virtual"}),
        )

    def add(self, question: GeoQuestion) -> str:
        key = make_question_key(self.prefix, question.username, question.id)
        body = json.dumps(question.model_dump(mode="json")).encode("utf-8")
        try:
            self.s3.upload_fileobj(
                Fileobj=io.BytesIO(body),
                Bucket=self.bucket,
                Key=key,
                ExtraArgs={"ContentType": "application/json"},
            )
        except ClientError:
            logger.exception(f"Failed to store question {question.id} at {key}")
            raise
        logger.info(f"Stored question {question.id} at s3://{self.bucket}/{key}")
        return question.id

    def _list_keys(self, prefix: str) -> List[str]:
        paginator = self.s3.get_paginator("list_objects_v2")
        keys: List[str] = []
        for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
            for obj in page.get("Contents", []):
                if obj["Key"].endswith(".json"):
                    keys.append(obj["Key"])
        return keys

    def _load(self, key: str) -> GeoQuestion:
        obj = self.s3.get_object(Bucket=self.bucket, Key=key)
        return GeoQuestion.model_validate(json.loads(obj["Body"].read()))

    def _load_all(self, prefix: str) -> List[GeoQuestion]:
        try:
            return [self._load(key) for key in self._list_keys(prefix)]
        except ClientError:
            logger.exception(f"Failed to list questions under s3://{self.bucket}/{prefix}")
            raise

    def list_recent(self, limit: int = 200) -> List[GeoQuestion]:
        return newest_first(self._load_all(f"{self.prefix}/"), limit)

    def list_by_user(self, username: str, limit: int = 200) -> List[GeoQuestion]:
        # Slugs are case-insensitive, usernames are not.
        questions = self._load_all(make_user_prefix(self.prefix, username))
        return newest_first([q for q in questions if q.username == username], limit)
