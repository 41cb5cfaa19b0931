"""
Infrastructure layer: generative-text report client with retry logic.
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from app.config import settings
from app.domain.models import AppData
from app.infrastructure.api_constants import (
    APIConstants,
    ReportAPIEndpoints,
    ReportMessages,
    ReportPrompts,
)

logger = logging.getLogger(__name__)


class ExternalAPIError(Exception):
    """Custom exception for report API errors that should not be retried."""

    def __init__(self, message: str, status_code: int = 502):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def build_report_prompt(data: AppData, query: Optional[str] = None) -> str:
    """
    Build the instruction sent to the model.

    The whole aggregate is embedded as pretty-printed camelCase JSON. A
    blank query is replaced by the default analysis request.

    Args:
        data: Current application snapshot
        query: Optional free-text question from the operator

    Returns:
        Prompt text
    """
    data_json = json.dumps(
        data.model_dump(mode="json", by_alias=True),
        indent=2,
        ensure_ascii=False,
    )
    return ReportPrompts.TEMPLATE.format(
        company=ReportPrompts.COMPANY_NAME,
        data_json=data_json,
        query=(query or "").strip() or ReportPrompts.DEFAULT_QUERY,
        language=settings.report_language,
    )


def extract_report_text(payload: Dict[str, Any]) -> str:
    """Concatenate the text parts of the first candidate, or '' if there are none."""
    candidates = payload.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts)


class ReportClient:
    """
    Client for the hosted generative-text API.

    ``generate_report`` never raises: a missing key, an empty answer or any
    request failure resolves to a readable message from ``ReportMessages``.
    Transient failures (5xx, transport errors) are retried with exponential
    backoff first.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        """Initialize the client; arguments default to the configured settings."""
        self.base_url = base_url or settings.report_api_base_url
        self.api_key = settings.report_api_key if api_key is None else api_key
        self.model = model or settings.report_model
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                APIConstants.API_KEY_HEADER: self.api_key,
                "content-type": APIConstants.CONTENT_TYPE_JSON,
                "accept": APIConstants.CONTENT_TYPE_JSON,
            },
            timeout=settings.report_timeout,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "ReportClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    @retry(
        stop=stop_after_attempt(settings.max_retry_attempts),
        wait=wait_exponential(
            multiplier=settings.retry_backoff_multiplier,
            min=settings.retry_min_wait,
            max=settings.retry_max_wait,
        ),
        retry=retry_if_exception_type((httpx.HTTPStatusError, httpx.RequestError)),
        reraise=True,
    )
    async def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> Dict[str, Any]:
        """
        Make an HTTP request with retry logic.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            **kwargs: Additional arguments for the request

        Returns:
            Response data as dictionary

        Raises:
            ExternalAPIError: On client errors (4xx), which are not retried
            httpx.HTTPStatusError: On server errors after retries
            httpx.RequestError: On transport errors after retries
        """
        try:
            response = await self.client.request(method, endpoint, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            # Retry on server errors (5xx)
            if e.response.status_code >= 500:
                raise
            raise ExternalAPIError(
                f"API request failed: {e.response.status_code} - {e.response.text}",
                status_code=e.response.status_code,
            )

    async def generate_report(self, data: AppData, query: Optional[str] = None) -> str:
        """
        Generate an analytical report over the current data.

        Args:
            data: Current application snapshot, sent whole
            query: Optional operator question; blank uses the default analysis

        Returns:
            Markdown-ish report text, or a fallback message on any failure
        """
        if not self.is_configured:
            logger.error("Report API key is missing; set REPORT_API_KEY or API_KEY")
            return ReportMessages.NOT_CONFIGURED

        body = {
            "contents": [{"parts": [{"text": build_report_prompt(data, query)}]}],
            "generationConfig": {
                "thinkingConfig": {"thinkingBudget": APIConstants.THINKING_BUDGET},
            },
        }
        try:
            payload = await self._make_request(
                "POST",
                ReportAPIEndpoints.generate_content(self.model),
                json=body,
            )
            text = extract_report_text(payload)
        except Exception as e:
            logger.exception(f"Report API error: {str(e)}")
            return ReportMessages.FAILED

        return text or ReportMessages.EMPTY


# Singleton instance
_report_client: Optional[ReportClient] = None


def get_report_client() -> ReportClient:
    """
    Get or create the singleton report client instance.

    Returns:
        ReportClient instance
    """
    global _report_client
    if _report_client is None:
        _report_client = ReportClient()
    return _report_client
