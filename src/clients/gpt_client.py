from langchain_openai import ChatOpenAI
from config.config import SETTINGS


class GPTClient:
    """Vision-capable chat model used to turn a photo into a question."""

    def __init__(
        self,
        model: str,
        timeout: int = 120,
        max_retries: int = 3,
        max_tokens: int = 1000,
        json_mode: bool = False,
    ):
        model_kwargs = (
            {"response_format": {"type": "json_object"}} if json_mode else {}
        )
        self.llm = ChatOpenAI(
            model=model,
            api_key=SETTINGS.openai_api_key or None,
            temperature=SETTINGS.model_temperature,
            timeout=timeout,
            max_retries=max_retries,
            max_tokens=max_tokens,
            model_kwargs=model_kwargs,
        )

    def instance(self) -> ChatOpenAI:
        return self.llm
