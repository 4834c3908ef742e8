"""In-memory pixel images and colour conversion for a display visual."""

from __future__ import annotations

from dataclasses import dataclass

_SCANLINE_PAD_BITS = 32


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, bit count) of the contiguous run of ones in ``mask``."""
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


@dataclass(frozen=True)
class Visual:
    """A TrueColor visual: its depth and the masks of its colour channels."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF

    def shifts(self) -> tuple[int, int, int, int, int, int]:
        """Return (red shift, red bits, green shift, green bits, blue shift, blue bits)."""
        red = _mask_layout(self.red_mask)
        green = _mask_layout(self.green_mask)
        blue = _mask_layout(self.blue_mask)
        return (*red, *green, *blue)

    def convert_color(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to a pixel value for this visual.

        Visuals of depth 24 or more take the colour unchanged; shallower
        ones pack the top bits of each channel at the channel's position.
        """
        if self.depth >= 24:
            return color
        red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = self.shifts()
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - red_bits)) << red_shift)
            + ((green >> (16 - green_bits)) << green_shift)
            + ((blue >> (16 - blue_bits)) << blue_shift)
        )


class Image:
    """A pixel buffer laid out in scanlines padded to 32 bits.

    ``byte_order`` is 0 for little-endian pixels and 1 for big-endian ones.
    """

    def __init__(self, width: int, height: int, bits_per_pixel: int = 32, byte_order: int = 0):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bits_per_pixel}")
        if byte_order not in (0, 1):
            raise ValueError(f"byte order must be 0 or 1, got {byte_order}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.byte_order = byte_order
        pad = _SCANLINE_PAD_BITS
        self.size_line = (width * bits_per_pixel + pad - 1) // pad * (pad // 8)
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _endianness(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), keeping only the bits a pixel holds."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._endianness)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._endianness)


def new_image(width: int, height: int) -> Image:
    """Create a blank 32-bit little-endian image."""
    return Image(width, height, 32, 0)