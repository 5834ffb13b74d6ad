"""Workflow tying generation and editing to the session store."""

from dataclasses import dataclass
from uuid import UUID

from food_photographer.domain.images import Style, TrackedImage
from food_photographer.services.editing import EditService
from food_photographer.services.generation import BatchResult, GenerationService
from food_photographer.services.session_store import SessionStore


@dataclass
class PhotoStudio:
    """Runs user actions and publishes their results to the store."""

    generation_service: GenerationService
    edit_service: EditService
    store: SessionStore

    async def generate(self, menu_text: str, style: Style) -> BatchResult:
        """Generate a new batch and make it the current session."""
        result = await self.generation_service.generate_batch(menu_text, style)
        self.store.reset(result.session)
        return result

    async def edit(self, image_id: UUID, prompt: str) -> TrackedImage:
        """Edit the current state of an image and store the result."""
        image = self.store.get(image_id)
        updated = await self.edit_service.apply_edit(image, prompt)
        self.store.replace_image(image, updated)
        return updated
