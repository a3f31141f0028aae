"""Basic Chromacore usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromacore import (
    BlendMode,
    Color,
    InterpolationSpace,
    contrast_ratio,
    mix,
    parse_color,
)


def demonstrate_colors() -> None:
    # Parse CSS text and convert between spaces.
    accent = parse_color("rgb(255 128 64 / 80%)")
    print("Parsed:", repr(accent), str(accent))
    print("HSLA:", accent.into_hsla())
    print("OKLCH:", accent.into_oklch())
    print("Back from OKLCH:", Color.from_oklch(accent.into_oklch()))


def demonstrate_compositing() -> None:
    # Linear-light over versus the fast sRGB approximation.
    half_red = Color(255, 0, 0, 128)
    print("over:", half_red.over(Color.BLUE))
    print("over_srgb_fast:", half_red.over_srgb_fast(Color.BLUE))

    for mode in (BlendMode.MULTIPLY, BlendMode.SCREEN, BlendMode.HUE):
        print(f"{mode.value}:", Color(200, 60, 30).blend_over(Color(40, 120, 220), mode))


def demonstrate_interpolation() -> None:
    # The same midpoint in the three interpolation spaces.
    for space in InterpolationSpace:
        print(f"{space.value} midpoint:", mix(Color.RED, Color.BLUE, 0.5, space))


def demonstrate_accessibility() -> None:
    gray = parse_color("#777")
    print("contrast #777 on white: %.2f" % contrast_ratio(gray, Color.WHITE))
    print("darker:", gray.darken_hsl(0.1), "lighter:", gray.lighten_linear(0.1))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_compositing()
    demonstrate_interpolation()
    demonstrate_accessibility()
