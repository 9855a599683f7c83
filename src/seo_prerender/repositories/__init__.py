"""Adapters over third-party libraries.

Each class here wraps one external library behind a protocol from
``seo_prerender.protocols``:
- UserAgentBotDetector: ``user-agents`` signature matching
- HttpxClient: ``httpx`` async client
- PillowImageCodec: ``Pillow`` resize and JPEG encoding

The adapters are protocol-based (structural typing), not inheritance-based.
"""

from seo_prerender.protocols import BotDetector, HttpClient, ImageCodec

from .httpx_client import HttpxClient
from .pillow_codec import PillowImageCodec
from .user_agent_detector import UserAgentBotDetector

__all__ = [
    "BotDetector",
    "HttpClient",
    "ImageCodec",
    "HttpxClient",
    "PillowImageCodec",
    "UserAgentBotDetector",
]
