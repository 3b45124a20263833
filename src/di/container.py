from dependency_injector import containers, providers
from clients.gpt_client import GPTClient
from clients.local_question_store import LocalQuestionStore
from clients.s3_question_store import S3QuestionStore
from ui.create_page import CreatePage
from ui.explore_page import ExplorePage
from ui.my_questions_page import MyQuestionsPage
from utils.prompt_utils import load_prompts
from utils.rarity import RarityRoller
from workflows.explore_workflow import ExploreWorkflow
from workflows.llm_question_generation_workflow import LLMQuestionGenerationWorkflow
from workflows.publish_question_workflow import PublishQuestionWorkflow
from workflows.question_generation_workflow import QuestionGenerationWorkflow
from config.config import SETTINGS


class Container(containers.DeclarativeContainer):
    prompts = load_prompts()
    # Clients
    gpt_client_vision = providers.Singleton(
        GPTClient, model=SETTINGS.openai_model_vision, json_mode=True
    )
    question_store = providers.Selector(
        providers.Object(SETTINGS.question_store),
        local=providers.Singleton(
            LocalQuestionStore, path=SETTINGS.local_store_path
        ),
        s3=providers.Singleton(S3QuestionStore),
    )
    rarity_roller = providers.Singleton(RarityRoller)

    # LLM Workflows
    llm_question_generation_workflow = providers.Singleton(
        LLMQuestionGenerationWorkflow,
        gpt_client=gpt_client_vision,
        prompts=prompts["question_generation"],
    )

    # Complex Workflows
    question_generation_workflow = providers.Singleton(
        QuestionGenerationWorkflow,
        llm_question_generation_workflow=llm_question_generation_workflow,
        rarity_roller=rarity_roller,
    )
    publish_question_workflow = providers.Singleton(
        PublishQuestionWorkflow,
        question_store=question_store,
        rarity_roller=rarity_roller,
    )
    explore_workflow = providers.Singleton(
        ExploreWorkflow, question_store=question_store
    )

    # UI Pages
    create_page = providers.Singleton(
        CreatePage,
        question_generation_workflow=question_generation_workflow,
        publish_question_workflow=publish_question_workflow,
    )
    explore_page = providers.Singleton(
        ExplorePage, explore_workflow=explore_workflow
    )
    my_questions_page = providers.Singleton(
        MyQuestionsPage, question_store=question_store
    )
