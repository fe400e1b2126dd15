# app/clients/ai_client.py

from logging import getLogger
from typing import NoReturn

from google.genai import Client
from google.genai.client import AsyncClient
from google.genai.errors import APIError
from google.genai.types import (
    ContentListUnion,
    ContentListUnionDict,
    GenerateContentConfig,
    HttpOptions,
)
from httpx import RemoteProtocolError, TimeoutException
from pydantic import BaseModel

from app.configs import file_logger, settings
from app.decorators import with_retry
from app.errors import (
    AiAuthenticationError,
    AiError,
    AiGenerationError,
    AiNetworkError,
    AiQuotaExceededError,
)

logger = file_logger(getLogger(__name__))

# Network-related exceptions that should be caught and converted
NETWORK_EXCEPTIONS = (
    RemoteProtocolError,
    TimeoutException,
    ConnectionError,
    OSError,
)

RETRIABLE_EXCEPTIONS = (
    AiNetworkError,
    AiGenerationError,
    RemoteProtocolError,
    TimeoutException,
)


class AiClient:
    """
    Async client for Google's Gemini API returning validated pydantic objects.

    Attributes:
        client: The Google GenAI AsyncClient instance.
        model: The name of the Gemini model to use.
    """

    def __init__(self, api_key: str | None = None, model: str | None = None) -> None:
        """
        Initialize the AI client with API credentials.

        Raises:
            AiError: If the key is missing or the SDK rejects it.
        """
        key = api_key or settings.GEMINI_API_KEY
        if not key:
            msg = "GEMINI_API_KEY is required but not set"
            raise AiAuthenticationError(detail=msg)

        self.model = model or settings.GEMINI_MODEL
        try:
            # HttpOptions.timeout is in milliseconds
            http_options = HttpOptions(timeout=settings.AI_REQUEST_TIMEOUT * 1000)
            self._client = Client(api_key=key, http_options=http_options).aio
        except Exception as e:  # noqa: BLE001
            logger.exception("Failed to initialize Gemini client, invalid API key?")
            self._handle_exception(e)

        logger.info(f"AiClient initialized with model: {self.model}")

    @property
    def client(self) -> AsyncClient:
        """Get the AI client instance."""
        return self._client

    @with_retry(
        max_retries=settings.AI_MAX_RETRIES,
        base_delay=settings.AI_RETRY_DELAY,
        max_delay=settings.AI_RETRY_DELAY * 4,
        exec_retry=RETRIABLE_EXCEPTIONS,
    )
    async def _generate_content(
        self,
        contents: ContentListUnion | ContentListUnionDict,
        config: GenerateContentConfig,
    ) -> object:
        """
        Run one generation call and return the parsed structured output.

        Raises:
            AiGenerationError: If the response is empty or of the wrong type.
        """
        response = await self._client.models.generate_content(
            model=self.model,
            contents=contents,
            config=config,
        )

        if not response or not response.text:
            msg = "Empty response from Gemini API"
            raise AiGenerationError(detail=msg)

        schema = config.response_schema
        if isinstance(schema, type) and not isinstance(response.parsed, schema):
            msg = f"Unexpected response type: {type(response.parsed)}, expected {schema}"
            raise AiGenerationError(detail=msg)
        return response.parsed

    async def do_service[RespT: BaseModel](
        self,
        contents: ContentListUnion | ContentListUnionDict,
        system_instruction: str,
        resp_type: type[RespT],
        temperature: float = 0.7,
    ) -> RespT:
        """
        Generate structured content with the model.

        Args:
            contents: The prompt sent to the model.
            system_instruction: The system instruction for the generation.
            resp_type: Pydantic model the JSON response must match.
            temperature: Sampling temperature.

        Returns:
            An instance of ``resp_type``.

        Raises:
            AiError: Or one of its subclasses when generation fails.
        """
        config = GenerateContentConfig(
            response_mime_type="application/json",
            system_instruction=system_instruction,
            response_schema=resp_type,
            temperature=temperature,
        )

        try:
            result = await self._generate_content(contents, config)
        except AiError:
            raise
        except NETWORK_EXCEPTIONS as e:
            logger.exception(f"AI network error: {e}")
            detail = f"AI service temporarily unavailable: {e}"
            raise AiNetworkError(detail=detail) from e
        except APIError as e:
            self._handle_exception(e)

        if not isinstance(result, resp_type):
            msg = f"Unexpected response type: {type(result)}, expected {resp_type}"
            raise AiGenerationError(detail=msg)
        return result

    def _handle_exception(self, e: Exception) -> NoReturn:
        """Map SDK exceptions to specific AiError subclasses."""
        error_msg = str(e)
        logger.error(f"AI Error: {error_msg}")

        if "401" in error_msg or "unauthenticated" in error_msg.lower():
            raise AiAuthenticationError(detail=f"Authentication failed: {error_msg}") from e
        if "429" in error_msg or "quota" in error_msg.lower():
            raise AiQuotaExceededError(detail=f"Quota exceeded: {error_msg}") from e
        if "connection" in error_msg.lower():
            raise AiNetworkError(detail=f"Network error: {error_msg}") from e
        raise AiError(detail=f"An unexpected error occurred: {error_msg}") from e

    async def close(self) -> None:
        try:
            logger.info("Closing AI client")
            await self.client.aclose()
        except (AttributeError, OSError):
            logger.exception("Failed to close AI client")
        else:
            logger.info("AI client closed successfully")
