"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from food_photographer.config import Settings
from food_photographer.containers import AppContainer
from food_photographer.domain.errors import GenerationError
from food_photographer.domain.images import GeneratedImage, TrackedImage
from food_photographer.services.editing import EditService, ImageEditClient
from food_photographer.services.encoding import encode_to_data_uri
from food_photographer.services.generation import (
    GenerationService,
    ImageGenerationClient,
)
from food_photographer.services.session_store import SessionStore
from food_photographer.services.studio import PhotoStudio

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"
PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-png"


@dataclass
class FakeGenerationClient(ImageGenerationClient):
    """Fake generation client keyed on the dish at the end of the prompt."""

    failures: dict[str, Exception] = field(default_factory=dict)
    delays: dict[str, float] = field(default_factory=dict)
    calls: list[tuple[str, str]] = field(default_factory=list)
    completed: list[str] = field(default_factory=list)

    async def generate(self, *, prompt: str, aspect_ratio: str) -> GeneratedImage:
        self.calls.append((prompt, aspect_ratio))
        dish = prompt.rsplit(", ", 1)[-1]
        await asyncio.sleep(self.delays.get(dish, 0))
        self.completed.append(dish)
        if dish in self.failures:
            raise self.failures[dish]
        return GeneratedImage(
            payload=JPEG_BYTES + dish.encode(), media_type="image/jpeg"
        )


@dataclass
class FakeEditClient(ImageEditClient):
    """Fake edit client returning queued results in order."""

    results: list[GeneratedImage | GenerationError] = field(default_factory=list)
    calls: list[tuple[bytes, str, str]] = field(default_factory=list)
    delay: float = 0

    async def edit(
        self, *, payload: bytes, media_type: str, instruction: str
    ) -> GeneratedImage:
        self.calls.append((payload, media_type, instruction))
        await asyncio.sleep(self.delay)
        result = self.results.pop(0)
        if isinstance(result, GenerationError):
            raise result
        return result


def make_tracked_image(
    label: str = "Grilled Salmon",
    payload: bytes = JPEG_BYTES,
    media_type: str = "image/jpeg",
) -> TrackedImage:
    return TrackedImage(
        id=uuid4(),
        label=label,
        current_payload=encode_to_data_uri(payload, media_type),
        original_prompt=label,
    )


def edited_images(*payloads: bytes) -> list[GeneratedImage]:
    return [
        GeneratedImage(payload=payload, media_type="image/png") for payload in payloads
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key")


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def edit_client() -> FakeEditClient:
    return FakeEditClient()


@pytest.fixture
def container(
    settings: Settings,
    generation_client: FakeGenerationClient,
    edit_client: FakeEditClient,
) -> AppContainer:
    generation_service = GenerationService(generation_client)
    edit_service = EditService(edit_client)
    session_store = SessionStore()
    studio = PhotoStudio(
        generation_service=generation_service,
        edit_service=edit_service,
        store=session_store,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        generation_service=generation_service,
        edit_service=edit_service,
        session_store=session_store,
        studio=studio,
        close_resources=close_resources,
    )
