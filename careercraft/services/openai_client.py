"""
OpenAI API Client

The one place that talks to the language model. Callers hand over a
system prompt, a JSON-serialisable payload and the pydantic schema the
answer must satisfy; they get back a validated model instance or an
UpstreamFailure subclass.

Any OpenAI-compatible endpoint works (set OPENAI_BASE_URL).

Each call is attempted exactly once - no retries.
"""
import json
import logging
from typing import Any, Optional, Type, TypeVar

from fastapi import Request
from openai import OpenAI
from pydantic import BaseModel, ValidationError

from careercraft.core.config import get_settings
from careercraft.core.errors import (
    AIConfigurationError,
    AISchemaViolation,
    EmptyAIResponse,
    MalformedAIResponse,
    UpstreamFailure,
    flatten_errors
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class OpenAIClient:
    """
    Wrapper for the chat completions API with JSON-only output.

    `sdk` is built lazily from the API key; pass one in to use a
    preconfigured (or fake) client.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4-turbo-preview",
        base_url: Optional[str] = None,
        sdk: Any = None
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self._sdk = sdk

    @property
    def is_configured(self) -> bool:
        return self._sdk is not None or bool(self.api_key)

    @property
    def sdk(self) -> Any:
        if not self.is_configured:
            raise AIConfigurationError()
        if self._sdk is None:
            self._sdk = OpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._sdk

    def _call_api(self, system_prompt: str, user_content: str, temperature: float) -> Optional[str]:
        """
        Internal method to call the API.
        Returns raw message content (may be None/empty).
        """
        sdk = self.sdk
        try:
            response = sdk.chat.completions.create(
                model=self.model,
                temperature=temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content}
                ]
            )
        except Exception as e:
            logger.warning("OpenAI request failed: %s", e)
            raise UpstreamFailure(str(e) or None) from e

        if not response.choices:
            return None
        return getattr(response.choices[0].message, "content", None)

    def complete_json(
        self,
        system_prompt: str,
        payload: dict,
        schema: Type[T],
        temperature: float = 0.3
    ) -> T:
        """
        Send payload (as JSON) and validate the reply against schema.

        Raises, in order of checking:
            AIConfigurationError - no API key
            UpstreamFailure      - transport / provider error
            EmptyAIResponse      - no content
            MalformedAIResponse  - content is not JSON (raw echoed back)
            AISchemaViolation    - JSON does not match schema
        """
        content = self._call_api(system_prompt, json.dumps(payload, default=str), temperature)

        if not content:
            raise EmptyAIResponse()

        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("AI returned non-JSON output (%d chars)", len(content))
            raise MalformedAIResponse(raw=content)

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.warning("AI output failed %s validation: %d issue(s)", schema.__name__, e.error_count())
            raise AISchemaViolation(details=flatten_errors(e.errors()))

    def test_connection(self) -> bool:
        """Test if the API is reachable and answers in JSON mode"""
        try:
            content = self._call_api(
                "You are a test assistant. Reply with a JSON object.",
                json.dumps({"reply": "OK"}),
                temperature=0
            )
            return bool(content) and "OK" in content.upper()
        except UpstreamFailure as e:
            logger.warning("AI connection test failed: %s", e.message)
            return False


def build_openai_client() -> OpenAIClient:
    """Client configured from settings."""
    settings = get_settings()
    return OpenAIClient(
        api_key=settings.openai_api_key,
        model=settings.ai_model,
        base_url=settings.openai_base_url
    )


def get_ai_client(request: Request) -> OpenAIClient:
    """FastAPI dependency - the AI client created at startup."""
    return request.app.state.ai_client
