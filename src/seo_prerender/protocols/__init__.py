"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the library behind each external collaborator
- Unit testing with in-memory fakes
- Clear separation of concerns

Usage:
    ```python
    from seo_prerender.protocols import BotDetector, HttpClient, ImageCodec

    detector: BotDetector = UserAgentBotDetector()
    client: HttpClient = HttpxClient.create()
    codec: ImageCodec = PillowImageCodec()
    ```
"""

from .bot_detector import BotDetector
from .http_client import HttpClient
from .image_codec import ImageCodec

__all__ = [
    "BotDetector",
    "HttpClient",
    "ImageCodec",
]
