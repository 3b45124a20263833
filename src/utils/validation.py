import re

from utils.constants import USERNAME_MAX_LENGTH, USERNAME_MIN_LENGTH

_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")


def validate_username(name: str | None) -> str:
    trimmed = (name or "").strip()
    if not trimmed:
        raise ValueError("Please enter a username.")
    if len(trimmed) < USERNAME_MIN_LENGTH:
        raise ValueError(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters."
        )
    if len(trimmed) > USERNAME_MAX_LENGTH:
        raise ValueError(
            f"Username must be {USERNAME_MAX_LENGTH} characters or fewer."
        )
    if not _USERNAME_PATTERN.match(trimmed):
        raise ValueError("Only letters, numbers, and underscores allowed.")
    return trimmed


def validate_image_upload(mime_type: str | None, size_bytes: int, max_mb: int) -> None:
    if not (mime_type or "").startswith("image/"):
        raise ValueError("Please upload an image file.")
    if size_bytes > max_mb * 1024 * 1024:
        raise ValueError(f"Image must be under {max_mb} MB.")


def validate_coordinates(lat: float, lng: float) -> None:
    if not -90 <= lat <= 90:
        raise ValueError(f"Latitude {lat} is outside [-90, 90].")
    if not -180 <= lng <= 180:
        raise ValueError(f"Longitude {lng} is outside [-180, 180].")
