"""Pillow glue: load images as RGBA and scale them for previews."""

from PIL import Image

PREVIEW_HEIGHT = 300


def load_rgba(path: str) -> Image.Image:
    """Open an image file and convert it to RGBA."""
    with Image.open(path) as img:
        return img.convert('RGBA')


def scale_to_height(image: Image.Image, max_height: int = PREVIEW_HEIGHT) -> Image.Image:
    """Resize so the height is ``max_height``, keeping the aspect ratio."""
    if max_height <= 0:
        raise ValueError(f'preview height must be positive, got {max_height}')
    scale = max_height / image.height
    width = max(1, round(image.width * scale))
    if (width, max_height) == image.size:
        return image.copy()
    return image.resize((width, max_height), Image.Resampling.LANCZOS)
