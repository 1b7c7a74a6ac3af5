"""Cache keys for event read endpoints.

List and detail keys live under separate prefixes so no slug can collide
with the list key.
"""

EVENT_LIST_KEY = "events:list"


def event_detail_key(slug: str) -> str:
    return f"events:detail:{slug}"
