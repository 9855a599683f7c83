"""Bot detection backed by the ``user-agents`` package."""

from user_agents import parse

# Link-preview fetchers that ua-parser files under a browser family:
# iMessage sends a Safari UA carrying these tokens, Skype its own.
PREVIEW_SIGNATURES = (
    "facebookexternalhit",
    "facebot",
    "twitterbot",
    "skypeuripreview",
)


class UserAgentBotDetector:
    """``user-agents`` implementation of the BotDetector protocol.

    Example:
        ```python
        detector = UserAgentBotDetector()
        detector.is_bot("facebookexternalhit/1.1")  # True
        detector.is_bot("")  # False
        ```
    """

    def is_bot(self, user_agent: str) -> bool:
        if not user_agent:
            return False
        lowered = user_agent.lower()
        if any(signature in lowered for signature in PREVIEW_SIGNATURES):
            return True
        return bool(parse(user_agent).is_bot)
