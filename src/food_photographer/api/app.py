"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status

from food_photographer.api.models import (
    EditRequest,
    GenerationRequest,
    ImagePayload,
    SessionPayload,
    StylePayload,
)
from food_photographer.app_logging import configure_logging
from food_photographer.containers import AppContainer
from food_photographer.domain.errors import (
    CorruptStateError,
    EditConflictError,
    EditFailedError,
    EmptyInputError,
    EmptyPromptError,
    ImageNotFoundError,
)
from food_photographer.domain.images import DEFAULT_STYLE, Style


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/styles")
    async def list_styles() -> list[StylePayload]:
        """Return the available style presets."""
        return [
            StylePayload(
                name=style.name,
                label=style.value,
                prompt_prefix=style.profile.prompt_prefix,
                aspect_ratio=style.profile.aspect_ratio,
                is_default=style is DEFAULT_STYLE,
            )
            for style in Style
        ]

    @app.post("/generations")
    async def generate(body: GenerationRequest, request: Request) -> SessionPayload:
        """Generate one photo per menu line and replace the session."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.studio.generate(body.menu_text, body.style)
        except EmptyInputError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        if result.errors:
            logger.info("Batch finished with %s failed dishes", len(result.errors))
        return SessionPayload.from_domain(result.session, result.errors)

    @app.get("/images")
    async def list_images(request: Request) -> SessionPayload:
        """Return the current session."""
        state_container: AppContainer = request.app.state.container
        return SessionPayload.from_domain(state_container.session_store.current)

    @app.get("/images/{image_id}")
    async def get_image(image_id: UUID, request: Request) -> ImagePayload:
        """Return one tracked image."""
        state_container: AppContainer = request.app.state.container
        try:
            image = state_container.session_store.get(image_id)
        except ImageNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
        return ImagePayload.from_domain(image)

    @app.post("/images/{image_id}/edits")
    async def edit_image(
        image_id: UUID, body: EditRequest, request: Request
    ) -> ImagePayload:
        """Apply an edit to the current state of an image."""
        state_container: AppContainer = request.app.state.container
        try:
            updated = await state_container.studio.edit(image_id, body.prompt)
        except ImageNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
        except EmptyPromptError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except EditFailedError as exc:
            logger.warning("Edit failed", extra={"image_id": str(image_id)})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Failed to edit image: {exc.reason}",
            ) from exc
        except EditConflictError as exc:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=str(exc)
            ) from exc
        except CorruptStateError:
            logger.exception(
                "Stored image payload is corrupt", extra={"image_id": str(image_id)}
            )
            raise
        return ImagePayload.from_domain(updated)

    return app
