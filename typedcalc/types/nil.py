from __future__ import annotations


class NullType:
    """Payload type of a domain's canonical empty value."""

    def __repr__(self): return "null"
    def __bool__(self): return False


Null = NullType()
