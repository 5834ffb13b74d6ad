"""Domain models for generated images and sessions."""

from dataclasses import dataclass, replace
from enum import Enum
from uuid import UUID

from food_photographer.domain.errors import ImageNotFoundError

ASPECT_RATIOS = ("1:1", "3:4", "4:3", "9:16", "16:9")

_PROMPT_BASE = "High-end, professional food photography, "


@dataclass(frozen=True)
class StyleProfile:
    """Prompt prefix and aspect ratio for a style."""

    prompt_prefix: str
    aspect_ratio: str


class Style(Enum):
    """Aesthetic presets available for generation."""

    RUSTIC_DARK = "Rustic/Dark"
    BRIGHT_MODERN = "Bright/Modern"
    SOCIAL_MEDIA = "Social Media (Top-Down)"

    @property
    def profile(self) -> StyleProfile:
        return _STYLE_PROFILES[self]


_STYLE_PROFILES: dict[Style, StyleProfile] = {
    Style.RUSTIC_DARK: StyleProfile(
        prompt_prefix=f"{_PROMPT_BASE}rustic, dark lighting, moody, close-up, ",
        aspect_ratio="4:3",
    ),
    Style.BRIGHT_MODERN: StyleProfile(
        prompt_prefix=(
            f"{_PROMPT_BASE}bright, modern, clean background, vibrant colors, "
        ),
        aspect_ratio="16:9",
    ),
    Style.SOCIAL_MEDIA: StyleProfile(
        prompt_prefix=(
            f"{_PROMPT_BASE}top-down view, social media ready, bright, clean, "
            "well-lit, "
        ),
        aspect_ratio="1:1",
    ),
}

DEFAULT_STYLE = Style.BRIGHT_MODERN


@dataclass(frozen=True)
class GeneratedImage:
    """Raw image bytes returned by the image service."""

    payload: bytes
    media_type: str


@dataclass(frozen=True)
class EditEntry:
    """One successful edit applied to a tracked image."""

    prompt: str
    result_payload: str


@dataclass(frozen=True)
class TrackedImage:
    """A generated photograph with its identity and edit lineage."""

    id: UUID
    label: str
    current_payload: str
    original_prompt: str
    edit_history: tuple[EditEntry, ...] = ()

    def with_edit(self, prompt: str, result_payload: str) -> "TrackedImage":
        """Return the image after appending a successful edit."""
        return replace(
            self,
            current_payload=result_payload,
            edit_history=(
                *self.edit_history,
                EditEntry(prompt=prompt, result_payload=result_payload),
            ),
        )


@dataclass(frozen=True)
class Session:
    """Ordered set of tracked images currently displayed."""

    images: tuple[TrackedImage, ...] = ()

    @classmethod
    def empty(cls) -> "Session":
        return cls()

    def find(self, image_id: UUID) -> TrackedImage:
        """Return the image with the given id."""
        for image in self.images:
            if image.id == image_id:
                return image
        raise ImageNotFoundError(str(image_id))

    def replace(self, updated: TrackedImage) -> "Session":
        """Return a new session with the matching image swapped out."""
        self.find(updated.id)
        return Session(
            images=tuple(
                updated if image.id == updated.id else image for image in self.images
            )
        )

    def __len__(self) -> int:
        return len(self.images)
