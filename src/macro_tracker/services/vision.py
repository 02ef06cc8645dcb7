"""Food photo analysis service using LLMs."""

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from macro_tracker.domain.errors import FoodAnalysisError, InvalidImageError
from macro_tracker.domain.vision import FoodEstimate

_NUTRIENT_FIELDS = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sodium",
    "cholesterol",
)

FOOD_ESTIMATE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "food_name": {"type": "string"},
        **{name: {"type": "integer", "minimum": 0} for name in _NUTRIENT_FIELDS},
        "description": {"type": "string"},
        "confidence": {"type": "integer", "minimum": 0, "maximum": 100},
    },
    "required": ["food_name", *_NUTRIENT_FIELDS, "description", "confidence"],
    "additionalProperties": False,
}

ANALYSIS_PROMPT = (
    "Analyze this image of food. Identify the main dish or components. "
    "Estimate the total calories, protein, carbs, fat, fiber, sugar (grams), "
    "sodium and cholesterol (milligrams) for the entire visible portion. "
    "Provide a short, concise food name, a one-sentence description of the "
    "food and portion, and a confidence score from 0 to 100. "
    "If no food is visible, return the name 'Unknown Food' with zero "
    "nutrients and zero confidence."
)

_DATA_URL_PREFIX = re.compile(r"^data:image/(png|jpeg|jpg|webp);base64,")


class VisionClient(Protocol):
    """Interface for LLM vision extraction."""

    async def extract(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured vision extraction data."""


@dataclass
class VisionService:
    """Service that prepares food analysis prompts and validates results."""

    client: VisionClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze(self, image_bytes: bytes) -> FoodEstimate:
        """Estimate nutrients for the food in an image.

        Raises ``FoodAnalysisError`` when the response is malformed or the
        model could not recognize any food.
        """
        raw = await self.client.extract(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            image_data_url=_to_data_url(image_bytes),
            schema=FOOD_ESTIMATE_SCHEMA,
            prompt=ANALYSIS_PROMPT,
        )
        try:
            estimate = FoodEstimate.model_validate(raw)
        except ValidationError as exc:
            raise FoodAnalysisError("Vision response did not match the schema") from exc
        if estimate.is_unrecognized:
            raise FoodAnalysisError(estimate.description or "No food recognized")
        return estimate


def decode_image(payload: str) -> bytes:
    """Decode a base64 image, with or without a data URL prefix."""
    cleaned = _DATA_URL_PREFIX.sub("", payload.strip())
    try:
        image_bytes = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidImageError("Image is not valid base64") from exc
    if not image_bytes:
        raise InvalidImageError("Image is empty")
    return image_bytes


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
