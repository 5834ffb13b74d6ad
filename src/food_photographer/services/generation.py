"""Batch generation of dish photographs from a menu."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from food_photographer.domain.errors import EmptyInputError, GenerationError
from food_photographer.domain.images import (
    GeneratedImage,
    Session,
    Style,
    TrackedImage,
)
from food_photographer.services.encoding import encode_to_data_uri

_logger = logging.getLogger(__name__)


class ImageGenerationClient(Protocol):
    """Interface for text-to-image generation."""

    async def generate(self, *, prompt: str, aspect_ratio: str) -> GeneratedImage:
        """Return one generated image for the prompt."""


@dataclass(frozen=True)
class BatchResult:
    """Outcome of a batch generation request."""

    session: Session
    errors: tuple[str, ...]


@dataclass
class GenerationService:
    """Fans out one generation call per dish and collects the results."""

    client: ImageGenerationClient

    async def generate_batch(self, menu_text: str, style: Style) -> BatchResult:
        """Generate one image per menu line.

        Calls run concurrently; a failed dish is reported in ``errors`` and
        never affects the others. Images keep the order of the menu lines.
        """
        dishes = parse_dishes(menu_text)
        if not dishes:
            raise EmptyInputError("Please enter your menu items.")

        outcomes = await asyncio.gather(
            *(self._generate_dish(dish, style) for dish in dishes)
        )

        images: list[TrackedImage] = []
        errors: list[str] = []
        for dish, outcome in zip(dishes, outcomes, strict=True):
            if isinstance(outcome, GenerationError):
                errors.append(f'Failed to generate image for "{dish}": {outcome}')
                continue
            images.append(
                TrackedImage(
                    id=uuid4(),
                    label=dish,
                    current_payload=encode_to_data_uri(
                        outcome.payload, outcome.media_type
                    ),
                    original_prompt=dish,
                )
            )
        _logger.info(
            "Generated batch: style=%s dishes=%s succeeded=%s",
            style.name,
            len(dishes),
            len(images),
        )
        return BatchResult(session=Session(images=tuple(images)), errors=tuple(errors))

    async def _generate_dish(
        self, dish: str, style: Style
    ) -> GeneratedImage | GenerationError:
        try:
            return await self.client.generate(
                prompt=build_prompt(dish, style),
                aspect_ratio=style.profile.aspect_ratio,
            )
        except GenerationError as exc:
            _logger.warning("Generation failed for %r: %s", dish, exc)
            return exc


def parse_dishes(menu_text: str) -> list[str]:
    """Split menu text into trimmed, non-empty dish lines."""
    return [line.strip() for line in menu_text.splitlines() if line.strip()]


def build_prompt(dish: str, style: Style) -> str:
    """Prefix a dish with the style's prompt template."""
    return f"{style.profile.prompt_prefix}{dish}"
