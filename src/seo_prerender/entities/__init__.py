"""Domain entities for internal representation.

These are pure dataclasses (frozen) and enums used internally by services
and handlers. Upstream API payloads are parsed with the DTOs from the dto
package and converted to these entities before anything renders them.
"""

from .entity_ref import EntityKind, EntityRef
from .page_metadata import PageMetadata
from .prerender_decision import DecisionKind, PrerenderDecision

__all__ = [
    "EntityKind",
    "EntityRef",
    "PageMetadata",
    "DecisionKind",
    "PrerenderDecision",
]
