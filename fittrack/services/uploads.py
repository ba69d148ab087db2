from fastapi import UploadFile, HTTPException

ALLOWED_IMAGE_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
}
MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10 MB


def validate_image(file: UploadFile, content: bytes) -> None:
    if file.content_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=415,
            detail=f"File type '{file.content_type}' is not allowed. Allowed: JPEG, PNG, GIF.",
        )
    if not content:
        raise HTTPException(status_code=400, detail="Empty file.")
    if len(content) > MAX_IMAGE_SIZE:
        raise HTTPException(
            status_code=413,
            detail="File size exceeds 10 MB limit.",
        )


async def read_image(file: UploadFile) -> tuple[bytes, str]:
    """Прочитать и проверить загруженное фото. Returns (content, content_type)."""
    content = await file.read()
    validate_image(file, content)
    return content, file.content_type
