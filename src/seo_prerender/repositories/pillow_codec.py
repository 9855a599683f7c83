"""Pillow-based image codec."""

import io

from PIL import Image, ImageOps, UnidentifiedImageError

from seo_prerender.exceptions import ImageProcessingError


class PillowImageCodec:
    """Pillow implementation of the ImageCodec protocol.

    Resizes with ``ImageOps.fit`` (scale, then centre crop to fill the
    target box) and encodes an optimized JPEG.
    """

    def compress(self, data: bytes, width: int, height: int, quality: int) -> bytes:
        try:
            with Image.open(io.BytesIO(data)) as source:
                image = ImageOps.exif_transpose(source)
                if image.mode != "RGB":
                    # JPEG has no alpha channel
                    image = image.convert("RGB")
                fitted = ImageOps.fit(image, (width, height), method=Image.Resampling.LANCZOS)

                buffer = io.BytesIO()
                fitted.save(buffer, format="JPEG", quality=quality, optimize=True)
                return buffer.getvalue()
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ImageProcessingError(f"Cannot compress image: {e}") from e
