"""Reference values shared by the test modules."""
import random

# (r, g, b) -> (hue degrees, saturation %, lightness %)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (255, 255, 0): (60.0, 100.0, 50.0),
    (0, 255, 255): (180.0, 100.0, 50.0),
    (255, 0, 255): (300.0, 100.0, 50.0),
    (102, 51, 153): (270.0, 50.0, 40.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

# (r, g, b) -> OKLab (L, a, b), published reference values
samples_rgb_oklab = {
    (255, 255, 255): (1.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 0): (0.62796, 0.22486, 0.12585),
    (0, 255, 0): (0.86644, -0.23389, 0.17950),
    (0, 0, 255): (0.45201, -0.03246, -0.31153),
}

# 8-bit code -> linear light
samples_srgb_linear = {
    0: 0.0,
    10: 0.0030352698354883,
    128: 0.2158605001138992,
    188: 0.5028864580325687,
    255: 1.0,
}


def random_colors(count, seed=1234, alpha=False):
    """Deterministic random channel tuples."""
    rng = random.Random(seed)
    n = 4 if alpha else 3
    return [tuple(rng.randrange(256) for _ in range(n)) for _ in range(count)]
