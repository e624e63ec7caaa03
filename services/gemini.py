# services/gemini.py
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Callable

from google import genai
from google.genai import types
from pydantic import ValidationError

from config import settings
from core.exceptions import ConfigurationError, RemoteServiceError
from core.models.meal import NutritionInfo
from services.images import EncodedImage, ImageSource, encode_image

_LOG = logging.getLogger(__name__)

# ───────────── Prompt & Response Schema ─────────────
INSTRUCTION = (
    "Analyze the image and provide nutritional information for this meal. "
    "Be as accurate as possible."
)

_INT_FIELDS = ("calories", "carbs", "protein", "fats", "healthScore")


def _field_schema(alias: str, description: str | None) -> types.Schema:
    kind = types.Type.INTEGER if alias in _INT_FIELDS else types.Type.STRING
    return types.Schema(type=kind, description=description)


NUTRITION_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        f.alias: _field_schema(f.alias, f.description)
        for f in NutritionInfo.model_fields.values()
    },
    required=[f.alias for f in NutritionInfo.model_fields.values()],
)


# ───────────── Client ─────────────
class NutritionAnalyzer:
    """Single-shot Gemini call: photo in, `NutritionInfo` out.

    The SDK client is only built on the first call that has a credential,
    so a missing key fails before any network object exists.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gemini-2.5-flash",
        timeout_s: float = 30.0,
        client_factory: Callable[[str], Any] = lambda key: genai.Client(api_key=key),
    ):
        self.api_key = api_key
        self.model = model
        self.timeout_s = timeout_s
        self._client_factory = client_factory
        self._client: Any | None = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory(self.api_key)
        return self._client

    async def analyze(self, image: ImageSource, mime_type: str | None = None) -> NutritionInfo:
        """Estimate nutrition for one meal photo.

        Raises `ConfigurationError` (no key), `EncodingError` (unreadable
        image) or `RemoteServiceError` (anything that went wrong remotely
        or while parsing). No retries.
        """
        if not self.configured:
            raise ConfigurationError()

        encoded = encode_image(image, mime_type)
        _LOG.info("Analyzing %s image with %s", encoded.mime_type, self.model)

        try:
            text = await asyncio.wait_for(self._generate(encoded), timeout=self.timeout_s)
            info = NutritionInfo.model_validate(json.loads(text))
        except asyncio.TimeoutError as e:
            _LOG.error("Gemini call timed out after %.1fs", self.timeout_s)
            raise RemoteServiceError(details={"reason": "timeout"}) from e
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            _LOG.exception("Gemini returned an unusable nutrition payload")
            raise RemoteServiceError(details={"reason": "malformed response"}) from e
        except Exception as e:
            _LOG.exception("Error analyzing image with Gemini API")
            raise RemoteServiceError(details={"reason": str(e)}) from e

        _LOG.info("Analysis done: %s (%d kcal)", info.meal_name, info.calories)
        return info

    async def _generate(self, image: EncodedImage) -> str:
        resp = await self._get_client().aio.models.generate_content(
            model=self.model,
            contents=[image.to_part(), INSTRUCTION],
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=NUTRITION_SCHEMA,
            ),
        )
        return resp.text


# ───────────── Default analyzer ─────────────
_default: NutritionAnalyzer | None = None


def get_analyzer() -> NutritionAnalyzer:
    global _default
    if _default is None:
        _default = NutritionAnalyzer(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout_s=settings.gemini_timeout_s,
        )
    return _default


async def analyze_image(image: ImageSource, mime_type: str | None = None) -> NutritionInfo:
    return await get_analyzer().analyze(image, mime_type)
