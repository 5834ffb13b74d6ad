"""Tests for batch generation."""

import asyncio

import pytest

from food_photographer.domain.errors import (
    EmptyInputError,
    NoImageReturnedError,
    ServiceError,
)
from food_photographer.domain.images import Style
from food_photographer.services.encoding import decode_from_data_uri
from food_photographer.services.generation import (
    GenerationService,
    build_prompt,
    parse_dishes,
)
from tests.conftest import JPEG_BYTES, FakeGenerationClient

MENU = "Grilled Salmon\nSpicy Chicken Tacos\nVegetable Stir Fry"


def test_parse_dishes_trims_and_drops_blank_lines() -> None:
    text = "  Grilled Salmon \n\n\t\nSpicy Chicken Tacos\r\n   "

    assert parse_dishes(text) == ["Grilled Salmon", "Spicy Chicken Tacos"]


def test_build_prompt_prefixes_style_template() -> None:
    prompt = build_prompt("Vegetable Stir Fry", Style.RUSTIC_DARK)

    assert prompt == (
        "High-end, professional food photography, rustic, dark lighting, "
        "moody, close-up, Vegetable Stir Fry"
    )


def test_generate_batch_calls_client_once_per_dish() -> None:
    client = FakeGenerationClient()
    service = GenerationService(client)

    result = asyncio.run(service.generate_batch(MENU, Style.SOCIAL_MEDIA))

    assert len(client.calls) == 3
    prefix = Style.SOCIAL_MEDIA.profile.prompt_prefix
    assert [prompt for prompt, _ in client.calls] == [
        f"{prefix}Grilled Salmon",
        f"{prefix}Spicy Chicken Tacos",
        f"{prefix}Vegetable Stir Fry",
    ]
    assert {ratio for _, ratio in client.calls} == {"1:1"}
    assert result.errors == ()


def test_generate_batch_builds_tracked_images() -> None:
    service = GenerationService(FakeGenerationClient())

    result = asyncio.run(service.generate_batch(MENU, Style.BRIGHT_MODERN))

    images = result.session.images
    assert [image.label for image in images] == [
        "Grilled Salmon",
        "Spicy Chicken Tacos",
        "Vegetable Stir Fry",
    ]
    assert all(image.original_prompt == image.label for image in images)
    assert all(image.edit_history == () for image in images)
    assert len({image.id for image in images}) == 3
    payload, media_type = decode_from_data_uri(images[0].current_payload)
    assert payload == JPEG_BYTES + b"Grilled Salmon"
    assert media_type == "image/jpeg"


@pytest.mark.parametrize("menu_text", ["", "   ", "\n\t\n  \n"])
def test_generate_batch_rejects_empty_menu(menu_text: str) -> None:
    client = FakeGenerationClient()
    service = GenerationService(client)

    with pytest.raises(EmptyInputError):
        asyncio.run(service.generate_batch(menu_text, Style.BRIGHT_MODERN))

    assert client.calls == []


def test_generate_batch_keeps_menu_order_when_calls_finish_out_of_order() -> None:
    client = FakeGenerationClient(
        delays={"Grilled Salmon": 0.05, "Vegetable Stir Fry": 0.03}
    )
    service = GenerationService(client)

    result = asyncio.run(service.generate_batch(MENU, Style.BRIGHT_MODERN))

    assert client.completed[0] == "Spicy Chicken Tacos"
    assert [image.label for image in result.session.images] == [
        "Grilled Salmon",
        "Spicy Chicken Tacos",
        "Vegetable Stir Fry",
    ]


def test_generate_batch_reports_partial_failure() -> None:
    client = FakeGenerationClient(
        failures={"Spicy Chicken Tacos": ServiceError("quota exceeded")},
        delays={"Grilled Salmon": 0.05, "Vegetable Stir Fry": 0.03},
    )
    service = GenerationService(client)

    result = asyncio.run(service.generate_batch(MENU, Style.BRIGHT_MODERN))

    assert [image.label for image in result.session.images] == [
        "Grilled Salmon",
        "Vegetable Stir Fry",
    ]
    assert len(result.errors) == 1
    assert "Spicy Chicken Tacos" in result.errors[0]
    assert "quota exceeded" in result.errors[0]
    assert sorted(client.completed) == sorted(parse_dishes(MENU))


def test_generate_batch_returns_empty_session_when_all_fail() -> None:
    client = FakeGenerationClient(
        failures={
            "Grilled Salmon": NoImageReturnedError("No image generated."),
            "Spicy Chicken Tacos": ServiceError("boom"),
        }
    )
    service = GenerationService(client)

    result = asyncio.run(
        service.generate_batch("Grilled Salmon\nSpicy Chicken Tacos", Style.RUSTIC_DARK)
    )

    assert len(result.session) == 0
    assert len(result.errors) == 2
    assert result.errors[0].startswith('Failed to generate image for "Grilled Salmon"')


def test_generate_batch_propagates_unexpected_errors() -> None:
    client = FakeGenerationClient(failures={"Grilled Salmon": RuntimeError("bug")})
    service = GenerationService(client)

    with pytest.raises(RuntimeError):
        asyncio.run(service.generate_batch("Grilled Salmon", Style.RUSTIC_DARK))
