"""Gemini API client for image generation and editing."""

from dataclasses import dataclass

import httpx
from google import genai
from google.genai import errors, types

from food_photographer.domain.errors import (
    NoEditedImageReturnedError,
    NoImageReturnedError,
    ServiceError,
)
from food_photographer.domain.images import GeneratedImage
from food_photographer.services.editing import ImageEditClient
from food_photographer.services.encoding import detect_media_type
from food_photographer.services.generation import ImageGenerationClient


@dataclass
class GeminiImageClient(ImageGenerationClient, ImageEditClient):
    """Image client backed by Imagen generation and Gemini image editing."""

    client: genai.Client
    generation_model: str
    edit_model: str
    output_mime_type: str = "image/jpeg"

    @classmethod
    def create(
        cls,
        api_key: str,
        generation_model: str,
        edit_model: str,
        output_mime_type: str = "image/jpeg",
    ) -> "GeminiImageClient":
        """Create a Gemini image client."""
        return cls(
            client=genai.Client(api_key=api_key),
            generation_model=generation_model,
            edit_model=edit_model,
            output_mime_type=output_mime_type,
        )

    async def generate(self, *, prompt: str, aspect_ratio: str) -> GeneratedImage:
        """Generate a single image with Imagen."""
        try:
            response = await self.client.aio.models.generate_images(
                model=self.generation_model,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=1,
                    output_mime_type=self.output_mime_type,
                    aspect_ratio=aspect_ratio,
                ),
            )
        except (errors.APIError, httpx.HTTPError) as exc:
            raise ServiceError(str(exc)) from exc

        generated = response.generated_images or []
        image = generated[0].image if generated else None
        if image is None or not image.image_bytes:
            raise NoImageReturnedError("No image generated.")
        media_type = image.mime_type or detect_media_type(
            image.image_bytes, default=self.output_mime_type
        )
        return GeneratedImage(payload=image.image_bytes, media_type=media_type)

    async def edit(
        self, *, payload: bytes, media_type: str, instruction: str
    ) -> GeneratedImage:
        """Edit an image with a text instruction."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.edit_model,
                contents=[
                    types.Part.from_bytes(data=payload, mime_type=media_type),
                    types.Part.from_text(text=instruction),
                ],
                config=types.GenerateContentConfig(response_modalities=["IMAGE"]),
            )
        except (errors.APIError, httpx.HTTPError) as exc:
            raise ServiceError(str(exc)) from exc

        inline_data = _first_image_part(response)
        if inline_data is None:
            raise NoEditedImageReturnedError("No edited image returned by the model.")
        return GeneratedImage(payload=inline_data.data, media_type=inline_data.mime_type)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.aio.aclose()


def _first_image_part(response: types.GenerateContentResponse) -> types.Blob | None:
    """Return the first inline part whose MIME type is an image."""
    if not response.candidates:
        return None
    content = response.candidates[0].content
    if content is None or not content.parts:
        return None
    for part in content.parts:
        inline_data = part.inline_data
        if (
            inline_data is not None
            and inline_data.data
            and (inline_data.mime_type or "").startswith("image/")
        ):
            return inline_data
    return None
