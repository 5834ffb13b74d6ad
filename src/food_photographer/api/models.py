"""Pydantic models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel

from food_photographer.domain.images import Session, Style, TrackedImage


class GenerationRequest(BaseModel):
    """Menu text and style for a batch generation."""

    menu_text: str
    style: Style = Style.BRIGHT_MODERN


class EditRequest(BaseModel):
    """Instruction for editing one image."""

    prompt: str


class EditEntryPayload(BaseModel):
    """One applied edit."""

    prompt: str
    image_url: str


class ImagePayload(BaseModel):
    """Tracked image as rendered by clients."""

    id: UUID
    label: str
    image_url: str
    original_prompt: str
    edit_history: list[EditEntryPayload]

    @classmethod
    def from_domain(cls, image: TrackedImage) -> "ImagePayload":
        return cls(
            id=image.id,
            label=image.label,
            image_url=image.current_payload,
            original_prompt=image.original_prompt,
            edit_history=[
                EditEntryPayload(prompt=entry.prompt, image_url=entry.result_payload)
                for entry in image.edit_history
            ],
        )


class SessionPayload(BaseModel):
    """Current set of images plus any per-dish errors."""

    images: list[ImagePayload]
    errors: list[str] = []

    @classmethod
    def from_domain(
        cls, session: Session, errors: tuple[str, ...] = ()
    ) -> "SessionPayload":
        return cls(
            images=[ImagePayload.from_domain(image) for image in session.images],
            errors=list(errors),
        )


class StylePayload(BaseModel):
    """Style preset details."""

    name: str
    label: str
    prompt_prefix: str
    aspect_ratio: str
    is_default: bool
