import base64
import mimetypes
from typing import Optional


def to_data_url(data: bytes, filename: str = '', mime: Optional[str] = None) -> str:
    """Encode uploaded image bytes as a data URL so it can live on the record."""
    mime = mime or mimetypes.guess_type(filename)[0] or 'application/octet-stream'
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"
