from .patrol import PatrolResult, min_patrol_length, patrol, route_length

__all__ = [
    "PatrolResult",
    "min_patrol_length",
    "patrol",
    "route_length",
]
