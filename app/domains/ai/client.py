"""Google Gemini completion client.

One call to :meth:`GeminiCompletionClient.generate` is one attempt against the
model. Provider failures are classified into the AI exception kinds; retrying
is left to the caller.
"""

import asyncio
import logging
import re
from functools import lru_cache

import google.generativeai as genai
from google.generativeai.types import HarmBlockThreshold, HarmCategory

from app.core.config import settings
from app.exceptions.ai import (
    AIConfigurationError,
    AIContentFilterError,
    AIQuotaExceededError,
    AIRateLimitError,
    AIServiceError,
    AIServiceUnavailableError,
    AITimeoutError,
)

logger = logging.getLogger(__name__)

# Gemini candidate finish reasons
FINISH_REASON_MAX_TOKENS = 2
FINISH_REASON_SAFETY = 3
FINISH_REASON_RECITATION = 4


class GeminiCompletionClient:
    """Thin async wrapper around ``genai.GenerativeModel``."""

    def __init__(self, api_key: str | None = None, model_name: str | None = None):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model_name = model_name or settings.gemini_model
        self.model = None

    def _get_model(self):
        """Configure the SDK and build the model on first use."""
        if self.model is not None:
            return self.model

        if not self.api_key:
            raise AIConfigurationError("Gemini API key not configured")

        try:
            genai.configure(api_key=self.api_key)
            self.model = genai.GenerativeModel(
                model_name=self.model_name,
                safety_settings={
                    HarmCategory.HARM_CATEGORY_HARASSMENT: (HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE),
                    HarmCategory.HARM_CATEGORY_HATE_SPEECH: (HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE),
                    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: (HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE),
                    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: (HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE),
                },
                generation_config=genai.types.GenerationConfig(
                    candidate_count=1,
                    max_output_tokens=settings.gemini_max_tokens,
                    temperature=settings.gemini_temperature,
                ),
            )
        except Exception as e:
            logger.error(f"Failed to initialize Gemini client: {str(e)}")
            raise AIConfigurationError("Failed to initialize AI service") from e

        logger.info(f"Google Gemini client initialized with model: {self.model_name}")
        return self.model

    async def generate(self, prompt: str) -> str:
        """Send ``prompt`` to the model once and return the reply text."""
        model = self._get_model()

        try:
            response = await asyncio.wait_for(
                model.generate_content_async(prompt),
                timeout=settings.ai_request_timeout,
            )
        except TimeoutError:
            logger.warning(f"Gemini request timed out after {settings.ai_request_timeout}s")
            raise AITimeoutError() from None
        except AIServiceError:
            raise
        except Exception as e:
            raise self._classify_error(e) from e

        return self._extract_text(response)

    def _extract_text(self, response) -> str:
        """Pull the reply text out of a response, rejecting blocked or empty replies."""
        if not response:
            raise AIServiceUnavailableError("Empty response from AI service")

        if not getattr(response, "candidates", None):
            feedback = getattr(response, "prompt_feedback", None)
            logger.error(f"AI response has no candidates, prompt feedback: {feedback}")
            raise AIContentFilterError()

        candidate = response.candidates[0]
        finish_reason = getattr(candidate, "finish_reason", None)
        if finish_reason == FINISH_REASON_SAFETY:
            logger.error("Content blocked by safety filters")
            raise AIContentFilterError()
        if finish_reason == FINISH_REASON_RECITATION:
            logger.error("Response stopped for recitation")
            raise AIServiceUnavailableError("AI could not generate a proper response")
        if finish_reason == FINISH_REASON_MAX_TOKENS:
            logger.warning(f"Response truncated at max tokens ({settings.gemini_max_tokens})")

        try:
            text = response.text
        except (ValueError, IndexError) as e:
            logger.error(f"AI response carried no text: {str(e)}")
            raise AIServiceUnavailableError("AI returned empty content") from e

        if not text or not text.strip():
            raise AIServiceUnavailableError("AI returned empty text response")
        return text

    def _classify_error(self, error: Exception) -> AIServiceError:
        """Map a provider exception onto an AI exception kind."""
        full_error_msg = str(error)
        error_msg = full_error_msg.lower()
        retry_delay = extract_retry_delay(full_error_msg)

        # Quota errors often include "429" as well, so check them first
        if "quota" in error_msg:
            logger.error(f"Quota exceeded. Retry after {retry_delay}s. Error: {full_error_msg}")
            return AIQuotaExceededError(details={"retry_after": retry_delay})
        if "429" in full_error_msg or ("rate" in error_msg and "limit" in error_msg):
            logger.warning(f"Rate limit hit. Retry after {retry_delay}s")
            return AIRateLimitError(retry_after=retry_delay)
        if "safety" in error_msg or "blocked" in error_msg:
            logger.error(f"Content blocked by safety filters: {full_error_msg}")
            return AIContentFilterError()

        logger.error(f"Gemini API call failed: {full_error_msg}")
        return AIServiceUnavailableError()


def extract_retry_delay(error_message: str) -> int:
    """Extract the retry delay from a Gemini error message.

    Gemini reports it as e.g. "Please retry in 32.984803332s"; falls back to
    the configured minimum wait.
    """
    match = re.search(r"retry in (\d+(?:\.\d+)?)s", error_message)
    if match:
        return int(float(match.group(1))) + 1
    return int(settings.ai_retry_min_wait)


@lru_cache
def get_completion_client() -> GeminiCompletionClient:
    """FastAPI dependency returning the shared completion client."""
    return GeminiCompletionClient()
