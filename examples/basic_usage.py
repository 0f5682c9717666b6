"""Basic Tristimulus usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from tristimulus import Alpha, D50, D65, Lab, Xyz, Yxy, get_channel


def demonstrate_channels() -> None:
    # Integer channels map their full range onto [0, 1].
    u8 = get_channel(np.uint8)
    print("uint8 255 -> float:", u8.into_float(np.uint8(255)))
    # Demotion truncates, it does not round.
    print("float 0.5 -> uint8:", u8.from_float(0.5))


def demonstrate_colors() -> None:
    red = Xyz.new(0.4124, 0.2126, 0.0193, dtype=np.float64)
    print("XYZ -> Yxy:", red.convert("yxy").value)
    print("XYZ -> Lab:", red.convert(Lab).value)

    # Colors under another illuminant stay tagged with it.
    print("D50 white in Yxy:", Yxy.default(D50, np.float64).value)
    print("D65 white in Lab:", D65.get_xyz(np.float64).convert("lab").value)

    # Degenerate chromaticity never divides by zero.
    print("Yxy(0.3, 0, 0.5) -> XYZ:", Yxy.new(0.3, 0.0, 0.5).convert("xyz").value)


def demonstrate_arrays_and_alpha() -> None:
    batch = Xyz.from_channels(np.random.default_rng(0).random((4, 3)))
    print("batch chromaticity x:", batch.convert("yxy").x)

    xyza = Alpha.new(Xyz, 0.25, 0.40, 0.10, alpha=0.5)
    xyza.x = 0.3
    print("alpha-wrapped:", xyza)


if __name__ == "__main__":
    demonstrate_channels()
    demonstrate_colors()
    demonstrate_arrays_and_alpha()
