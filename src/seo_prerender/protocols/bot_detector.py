"""Bot detection protocol.

Defines the interface for any user-agent heuristic that can tell crawlers
apart from human visitors.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class BotDetector(Protocol):
    """Protocol for user-agent based bot classification.

    Any type with a matching ``is_bot`` method satisfies the protocol,
    no explicit inheritance needed.

    Example:
        ```python
        detector: BotDetector = UserAgentBotDetector()
        detector.is_bot("Googlebot/2.1 (+http://www.google.com/bot.html)")  # True
        ```
    """

    def is_bot(self, user_agent: str) -> bool:
        """Classify a user-agent string.

        Args:
            user_agent: Raw User-Agent header, empty string when absent

        Returns:
            True if the client is an automated crawler, False otherwise
        """
        ...
