import json
import os
from typing import Any, Optional

from openai import APIConnectionError, APITimeoutError, InternalServerError, OpenAI, RateLimitError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential


DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TIMEOUT_S = 60.0

# Transport failures worth another attempt; bad replies are not retried
RETRYABLE_ERRORS = (APIConnectionError, APITimeoutError, RateLimitError, InternalServerError)


class OpenAIClient:
    def __init__(self, model: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT_S) -> None:
        self.model = model or os.environ.get("OPENAI_MODEL", DEFAULT_MODEL)
        api_key = os.environ.get("OPENAI_API_KEY")
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY is not set in environment")
        # Retries are left to complete_json so each attempt is bounded by timeout
        self.client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    def _complete_json_once(self, messages: list) -> tuple:
        """Single attempt at JSON completion. Returns (data, is_empty, finish_reason)."""
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_completion_tokens=16384,
            response_format={"type": "json_object"},
        )
        text = resp.choices[0].message.content or "{}"
        finish_reason = resp.choices[0].finish_reason

        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            # Some models may wrap the document in code fences; try to strip
            stripped = text.strip().strip("`")
            if stripped.startswith("json"):
                stripped = stripped[len("json"):]
            data = json.loads(stripped)

        is_empty = (data == {} or not data)
        return data, is_empty, finish_reason

    @retry(
        reraise=True,
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        stop=stop_after_attempt(4),
        wait=wait_exponential(multiplier=1, min=1, max=8),
    )
    def complete_json(self, system: str, user: str) -> Any:
        """Complete with basic JSON mode. Retries once on empty response."""
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]

        data, is_empty, finish_reason = self._complete_json_once(messages)

        # Retry once if empty (transient failure)
        if is_empty:
            print(f"[openai] [warning] Empty response (finish_reason: {finish_reason}), retrying...")
            data, is_empty, finish_reason = self._complete_json_once(messages)
            if is_empty:
                print(f"[openai] [ERROR] Still empty after retry (finish_reason: {finish_reason})")
            else:
                print("[openai] [ok] Retry succeeded")

        return data


def make_client(model: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT_S) -> Optional[OpenAIClient]:
    """Return a client, or None when no API key is configured."""
    if not os.environ.get("OPENAI_API_KEY"):
        return None
    return OpenAIClient(model=model, timeout=timeout)
