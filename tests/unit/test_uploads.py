"""
Модульные тесты для проверки загружаемых фото еды.

Тестируются:
- validate_image: допустимые типы, пустой файл, превышение размера, граничный случай
- read_image: чтение содержимого UploadFile
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi import HTTPException, UploadFile

from fittrack.services.uploads import MAX_IMAGE_SIZE, read_image, validate_image

pytestmark = pytest.mark.unit


def make_upload_file(
    filename: str = "meal.jpg",
    content_type: str = "image/jpeg",
    content: bytes = b"fake_image_data",
) -> UploadFile:
    """Создать мок UploadFile с заданными параметрами."""
    mock_file = MagicMock(spec=UploadFile)
    mock_file.filename = filename
    mock_file.content_type = content_type
    mock_file.read = AsyncMock(return_value=content)
    return mock_file


@pytest.mark.parametrize("content_type", ["image/jpeg", "image/png", "image/gif"])
def test_validate_image_allowed_types_pass(content_type):
    validate_image(make_upload_file(content_type=content_type), b"x" * 100)


@pytest.mark.parametrize("content_type", ["application/pdf", "text/plain", "image/webp"])
def test_validate_image_disallowed_type_raises_415(content_type):
    with pytest.raises(HTTPException) as exc_info:
        validate_image(make_upload_file(content_type=content_type), b"x")
    assert exc_info.value.status_code == 415


def test_validate_image_empty_raises_400():
    with pytest.raises(HTTPException) as exc_info:
        validate_image(make_upload_file(), b"")
    assert exc_info.value.status_code == 400


def test_validate_image_too_large_raises_413():
    with pytest.raises(HTTPException) as exc_info:
        validate_image(make_upload_file(), b"x" * (MAX_IMAGE_SIZE + 1))
    assert exc_info.value.status_code == 413


def test_validate_image_exactly_max_size_passes():
    validate_image(make_upload_file(), b"x" * MAX_IMAGE_SIZE)


async def test_read_image_returns_content_and_type():
    upload = make_upload_file(content_type="image/png", content=b"png-bytes")
    content, content_type = await read_image(upload)
    assert content == b"png-bytes"
    assert content_type == "image/png"
