"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from food_photographer.adapters.gemini_image_client import GeminiImageClient
from food_photographer.config import Settings
from food_photographer.services.editing import EditService
from food_photographer.services.generation import GenerationService
from food_photographer.services.session_store import SessionStore
from food_photographer.services.studio import PhotoStudio


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    generation_service: GenerationService
    edit_service: EditService
    session_store: SessionStore
    studio: PhotoStudio
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    image_client = GeminiImageClient.create(
        api_key=resolved_settings.gemini_api_key,
        generation_model=resolved_settings.generation_model,
        edit_model=resolved_settings.edit_model,
        output_mime_type=resolved_settings.generation_mime_type,
    )
    generation_service = GenerationService(image_client)
    edit_service = EditService(image_client)
    session_store = SessionStore()
    studio = PhotoStudio(
        generation_service=generation_service,
        edit_service=edit_service,
        store=session_store,
    )

    async def close_resources() -> None:
        await image_client.close()

    return AppContainer(
        settings=resolved_settings,
        generation_service=generation_service,
        edit_service=edit_service,
        session_store=session_store,
        studio=studio,
        close_resources=close_resources,
    )
