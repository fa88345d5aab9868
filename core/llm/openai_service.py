"""
OpenAI Niche Service - Niche scans through an OpenAI-compatible chat API.

Requests JSON-schema output and hands the raw records to the normalizer.
Works against OpenAI itself or any compatible endpoint (Ollama, vLLM) via
``base_url``.
"""
from typing import Any, Dict, List, Optional, Tuple
import json
import logging

import openai
from openai import OpenAI
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from core.config_loader import LlmConfig
from core.exceptions import NicheScanError
from core.llm.interfaces import NicheSource
from core.llm.schema_models import NICHE_SCAN_SCHEMA
from core.llm.system_prompts import NICHE_SCAN_SYSTEM_PROMPT, build_scan_user_message

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)


def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    label = "Rate limit hit" if isinstance(exc, openai.RateLimitError) else "Transient API error"
    logger.warning(
        "%s (attempt %s). Waiting %.1fs before retry. Details: %s",
        label, retry_state.attempt_number, wait, exc,
    )


def _retry_after_seconds(exc: BaseException) -> float:
    """Seconds declared by a ``retry-after`` header, or 0.0 if absent/unparseable."""
    try:
        return max(0.0, float(exc.response.headers.get("retry-after", "")))
    except (AttributeError, TypeError, ValueError):
        return 0.0


def _wait_respecting_retry_after(retry_state: RetryCallState) -> float:
    """Honour the server's retry-after on rate limits, else exponential backoff (2s..60s)."""
    exc = retry_state.outcome.exception()
    if isinstance(exc, openai.RateLimitError):
        wait = _retry_after_seconds(exc)
        if wait > 0:
            return min(wait, 120)
    return wait_exponential(multiplier=1, min=2, max=60)(retry_state)


def _unwrap_schema_spec(spec: Dict[str, Any]) -> Tuple[str, bool, Dict[str, Any]]:
    """Split a wrapped spec {'name', 'strict', 'schema'} into its parts; raw schemas pass through."""
    if isinstance(spec, dict) and "schema" in spec and "name" in spec:
        return spec.get("name", "niche_response"), bool(spec.get("strict", False)), spec["schema"]
    return "niche_response", False, spec


def parse_niche_payload(content: Optional[str]) -> List[Any]:
    """
    Extract the raw niche list from a model response body.

    Accepts a top-level JSON array or an object with a ``niches`` array.

    Raises:
        NicheScanError: If the body is not JSON or holds no niches
    """
    try:
        data = json.loads(content or "[]")
    except json.JSONDecodeError as e:
        raise NicheScanError(f"Market scan returned malformed JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("niches", [])
    if not isinstance(data, list) or not data:
        raise NicheScanError("Market scan returned no results. Try again.")
    return data


class OpenAINicheService(NicheSource):
    """
    Niche source backed by an OpenAI-compatible chat completions endpoint.
    """

    def __init__(self, config: Optional[LlmConfig] = None, client: Optional[OpenAI] = None):
        self.config = config or LlmConfig()

        if client is None:
            client_kwargs: Dict[str, Any] = {'timeout': self.config.timeout_seconds}
            if self.config.api_key:
                client_kwargs['api_key'] = self.config.api_key
            if self.config.base_url:
                client_kwargs['base_url'] = self.config.base_url
            # Retries are handled by tenacity below
            client_kwargs['max_retries'] = 0
            client = OpenAI(**client_kwargs)
        self.client = client

        self._request = retry(
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            wait=_wait_respecting_retry_after,
            stop=stop_after_attempt(self.config.max_retries),
            before_sleep=_log_retry,
            reraise=True,
        )(self._create_completion)

    def _create_completion(self, count: int):
        name, strict, schema = _unwrap_schema_spec(NICHE_SCAN_SCHEMA)
        return self.client.chat.completions.create(
            model=self.config.model,
            messages=[
                {"role": "system", "content": NICHE_SCAN_SYSTEM_PROMPT},
                {"role": "user", "content": build_scan_user_message(count)},
            ],
            temperature=self.config.temperature,
            response_format={
                "type": "json_schema",
                "json_schema": {"name": name, "schema": schema, "strict": strict},
            },
        )

    def fetch_raw_niches(self, count: Optional[int] = None) -> List[Any]:
        """Run one market scan and return the raw niche records."""
        count = count or self.config.niche_count
        logger.info(f"Requesting {count} niches from {self.config.model}")

        try:
            response = self._request(count)
        except openai.OpenAIError as e:
            logger.error(f"Niche scan failed: {e}")
            raise NicheScanError(f"Niche scan failed: {e}") from e

        try:
            content = response.choices[0].message.content
        except (IndexError, AttributeError) as e:
            raise NicheScanError(f"Unexpected response shape: {e}") from e

        raws = parse_niche_payload(content)
        logger.info(f"Scan returned {len(raws)} raw niches")
        return raws
