"""Remote lookup of the models an API key can use."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import httpx

from core.constants import DEFAULT_API_BASE_URL, GENERATE_CONTENT_METHOD

logger = logging.getLogger(__name__)

MODELS_PATH = "/v1beta/models"
MODEL_NAME_PREFIX = "models/"


class ModelService:
    """List generation models via the Gemini REST API."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._timeout = timeout
        self._transport = transport

    @staticmethod
    def models_url(base_url: str) -> str:
        base = (base_url or "").strip().rstrip("/") or DEFAULT_API_BASE_URL
        return f"{base}{MODELS_PATH}"

    async def list_models(
        self,
        api_keys: Sequence[str],
        base_url: str = "",
    ) -> Optional[list[str]]:
        """
        Fetch model identifiers usable for content generation.

        Keys are tried in order; the first key that answers wins.

        Returns:
            Model identifiers without the ``models/`` prefix, or None when no
            key produced a usable answer.
        """
        url = self.models_url(base_url)
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            for index, api_key in enumerate(api_keys):
                if not api_key:
                    continue
                try:
                    response = await client.get(
                        url,
                        params={"key": api_key, "pageSize": 1000},
                    )
                    response.raise_for_status()
                    payload = response.json()
                except (httpx.HTTPError, ValueError) as exc:
                    logger.warning(
                        "Model listing failed with API key #%d: %s", index + 1, exc
                    )
                    continue
                models = self._extract_model_ids(payload)
                if models:
                    return models
        return None

    @staticmethod
    def _extract_model_ids(payload: object) -> list[str]:
        if not isinstance(payload, dict):
            return []
        entries = payload.get("models")
        if not isinstance(entries, list):
            return []

        model_ids: list[str] = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            name = entry.get("name")
            if not name or not isinstance(name, str):
                continue
            methods = entry.get("supportedGenerationMethods")
            if isinstance(methods, list) and GENERATE_CONTENT_METHOD not in methods:
                continue
            if name.startswith(MODEL_NAME_PREFIX):
                name = name[len(MODEL_NAME_PREFIX):]
            if name not in model_ids:
                model_ids.append(name)
        return model_ids
