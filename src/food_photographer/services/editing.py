"""Iterative editing of tracked images."""

import logging
from dataclasses import dataclass
from typing import Protocol

from food_photographer.domain.errors import (
    CorruptStateError,
    EditFailedError,
    EmptyPromptError,
    GenerationError,
    MalformedPayloadError,
)
from food_photographer.domain.images import GeneratedImage, TrackedImage
from food_photographer.services.encoding import (
    decode_from_data_uri,
    encode_to_data_uri,
)

_logger = logging.getLogger(__name__)


class ImageEditClient(Protocol):
    """Interface for instruction-based image editing."""

    async def edit(
        self, *, payload: bytes, media_type: str, instruction: str
    ) -> GeneratedImage:
        """Return the edited image."""


@dataclass
class EditService:
    """Applies text edits to the current state of a tracked image."""

    client: ImageEditClient

    async def apply_edit(self, image: TrackedImage, edit_prompt: str) -> TrackedImage:
        """Edit an image and return its successor with history extended."""
        if not edit_prompt.strip():
            raise EmptyPromptError("Please enter an edit prompt.")

        try:
            payload, media_type = decode_from_data_uri(image.current_payload)
        except MalformedPayloadError as exc:
            raise CorruptStateError(
                f"Stored payload for image {image.id} is not decodable"
            ) from exc

        try:
            edited = await self.client.edit(
                payload=payload,
                media_type=media_type,
                instruction=edit_prompt,
            )
        except GenerationError as exc:
            _logger.warning("Edit failed for image %s: %s", image.id, exc)
            raise EditFailedError(str(exc)) from exc

        result_payload = encode_to_data_uri(edited.payload, edited.media_type)
        return image.with_edit(edit_prompt, result_payload)
