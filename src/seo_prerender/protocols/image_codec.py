"""Image codec protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ImageCodec(Protocol):
    """Protocol for resizing and re-encoding images.

    Implementations are synchronous and CPU bound; callers run them off the
    event loop.
    """

    def compress(self, data: bytes, width: int, height: int, quality: int) -> bytes:
        """Resize an image to fill ``width`` x ``height`` and re-encode it as JPEG.

        Args:
            data: Encoded source image
            width: Target width in pixels
            height: Target height in pixels
            quality: JPEG quality (1-95)

        Returns:
            The encoded JPEG bytes

        Raises:
            ImageProcessingError: If the source cannot be decoded or encoded
        """
        ...
