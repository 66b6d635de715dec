"""Chat model construction for the generation agents."""

import logging

from botocore.config import Config
from langchain_anthropic import ChatAnthropic
from langchain_aws import ChatBedrock
from langchain_core.language_models.chat_models import BaseChatModel

from quizcraft.config.settings import Settings, get_settings
from quizcraft.errors import ConfigurationError

logger = logging.getLogger(__name__)


def require_generation_credentials(settings: Settings) -> None:
    """
    Fail before any network call when the provider credential is missing.

    Raises:
        ConfigurationError: if the configured provider has no credential
    """
    if not settings.has_generation_credentials():
        logger.error("Generation credential missing for provider %s", settings.llm_provider)
        raise ConfigurationError()


def create_chat_model(settings: Settings | None = None) -> BaseChatModel:
    """
    Create the chat model used for question generation.

    Args:
        settings: Settings to use (cached settings by default)

    Returns:
        A LangChain chat model for the configured provider

    Raises:
        ConfigurationError: if the provider credential is missing
    """
    settings = settings or get_settings()
    require_generation_credentials(settings)

    # Exactly one provider request per generation, no client retries
    if settings.llm_provider == "bedrock":
        return ChatBedrock(
            model=settings.model_name,
            temperature=settings.generation_temperature,
            region_name=settings.aws_default_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            config=Config(retries={"max_attempts": 1}),
        )

    return ChatAnthropic(
        model=settings.model_name,
        temperature=settings.generation_temperature,
        api_key=settings.anthropic_api_key,
        max_retries=0,
    )
