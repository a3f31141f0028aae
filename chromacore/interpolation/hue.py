from ..conversions.hsl import normalize_hue


def shortest_hue_delta(h1: float, h2: float) -> float:
    """Signed angular distance from ``h1`` to ``h2`` wrapped into (-180, 180]."""
    dh = h2 - h1
    if dh > 180.0:
        dh -= 360.0
    if dh <= -180.0:
        dh += 360.0
    return dh


def lerp_hue(h1: float, h2: float, t: float) -> float:
    """Interpolate along the shortest arc; result in [0, 360)."""
    return normalize_hue(h1 + shortest_hue_delta(h1, h2) * t)
