from langchain_core.prompts import ChatPromptTemplate
from langchain_core.messages import BaseMessage, SystemMessage, HumanMessage
from langchain_core.output_parsers import JsonOutputParser
from clients.gpt_client import GPTClient
from models.models import GeneratedQuestion, LLMQuestionGenerationInput
from typing import List, Dict, Any
from utils.prompt_utils import prompt_variables
from workflows.workflow import Workflow


class LLMQuestionGenerationWorkflow(Workflow):
    def __init__(self, gpt_client: GPTClient, prompts: Dict[str, str]):
        self.gpt_client = gpt_client
        self.prompts = prompts

    def _build_messages(self, input: LLMQuestionGenerationInput) -> List[BaseMessage]:
        variables = prompt_variables(input.subject, input.difficulty)
        system_message = SystemMessage(
            content=self.prompts["system_prompt"].format(**variables)
        )
        human_message = HumanMessage(
            content=[
                {"type": "image_url", "image_url": {"url": input.image_b64}},
                {
                    "type": "text",
                    "text": self.prompts["human_prompt"].format(**variables),
                },
            ]
        )
        return [system_message, human_message]

    def _coerce_input(self, payload: Dict[str, Any]) -> LLMQuestionGenerationInput:
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
        return LLMQuestionGenerationInput(
            image_b64=image_b64, subject=subject, difficulty=difficulty
        )

    def run(self, input: Dict[str, Any]) -> GeneratedQuestion:
        generation_input = self._coerce_input(input)
        prompt = ChatPromptTemplate.from_messages(
            self._build_messages(generation_input)
        )
        llm = self.gpt_client.instance()
        parser = JsonOutputParser()
        chain = prompt | llm | parser
        output = chain.invoke({})
        return GeneratedQuestion.model_validate(output)
