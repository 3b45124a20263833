import io
import base64
from PIL import Image, UnidentifiedImageError
from streamlit.runtime.uploaded_file_manager import UploadedFile


def to_data_url(data: bytes, mime: str | None = None) -> str:
    mime = (mime or "image/jpeg").strip()
    b64 = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{b64}"


def convert_file_to_base64(file: UploadedFile) -> str:
    file.seek(0)
    return to_data_url(file.getvalue(), getattr(file, "type", None))


def compress_image(data: bytes, max_dim: int = 300, quality: int = 60) -> str:
    """Downscale to fit within max_dim (never upscaling) and re-encode as base64 JPEG."""
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError("Failed to process image.") from e
    img = img.convert("RGB")
    w, h = img.size
    scale = min(max_dim / w, max_dim / h, 1)
    if scale < 1:
        img = img.resize(
            (max(1, int(w * scale)), max(1, int(h * scale))), Image.LANCZOS
        )
    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=quality)
    return base64.b64encode(buf.getvalue()).decode("ascii")
