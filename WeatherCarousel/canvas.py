"""Canvas abstraction for the dashboard - swaps image output with in-memory test backends."""
from abc import ABC, abstractmethod
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

RGB = Tuple[int, int, int]


def blend(start: RGB, end: RGB, t: float) -> RGB:
    """Linear interpolation between two colors, t in [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return tuple(int(round(a + (b - a) * t)) for a, b in zip(start, end))  # type: ignore[return-value]


class Canvas(ABC):
    """Abstract canvas interface for drawing the dashboard."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Get canvas width in pixels."""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """Get canvas height in pixels."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear the entire canvas (set all pixels to black)."""
        pass

    @abstractmethod
    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """
        Set a single pixel to the given RGB color.

        Args:
            x: X coordinate (0-based)
            y: Y coordinate (0-based)
            r: Red component (0-255)
            g: Green component (0-255)
            b: Blue component (0-255)
        """
        pass

    @abstractmethod
    def fill(self, r: int, g: int, b: int) -> None:
        """Fill the entire canvas with the given RGB color."""
        pass

    @abstractmethod
    def draw_text(self, x: int, y: int, text: str, r: int, g: int, b: int, font_size: int = 10) -> None:
        """Draw text with its top-left corner at (x, y)."""
        pass

    def fill_rect(self, x: int, y: int, w: int, h: int, color: RGB) -> None:
        """Fill a rectangle with a solid color, clipped to the canvas."""
        for py in range(max(y, 0), min(y + h, self.height)):
            for px in range(max(x, 0), min(x + w, self.width)):
                self.set_pixel(px, py, *color)

    def draw_gradient(self, x: int, y: int, w: int, h: int, start: RGB, end: RGB) -> None:
        """
        Fill a rectangle with a diagonal gradient, start at top-left, end at bottom-right.

        Pixels outside the canvas are skipped.
        """
        if w <= 0 or h <= 0:
            return
        for py in range(max(y, 0), min(y + h, self.height)):
            for px in range(max(x, 0), min(x + w, self.width)):
                t = ((px - x) / max(w - 1, 1) + (py - y) / max(h - 1, 1)) / 2
                self.set_pixel(px, py, *blend(start, end, t))


class FakeCanvas(Canvas):
    """
    Fake canvas implementation for testing - stores pixels in memory.

    Text is recorded rather than rasterized, see texts.
    """

    def __init__(self, width: int = 120, height: int = 40):
        self._width = width
        self._height = height
        # pixels[y][x] = (r, g, b)
        self._pixels = [[(0, 0, 0) for _ in range(width)] for _ in range(height)]
        self.texts = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self.fill(0, 0, 0)
        self.texts = []

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._pixels[y][x] = (r, g, b)

    def fill(self, r: int, g: int, b: int) -> None:
        self._pixels = [[(r, g, b) for _ in range(self._width)]
                        for _ in range(self._height)]

    def draw_text(self, x: int, y: int, text: str, r: int, g: int, b: int, font_size: int = 10) -> None:
        self.texts.append((x, y, text, (r, g, b)))

    def get_pixel(self, x: int, y: int) -> RGB:
        """Get pixel color at given coordinates (black outside the canvas)."""
        if 0 <= x < self._width and 0 <= y < self._height:
            return self._pixels[y][x]
        return (0, 0, 0)

    def to_ascii(self, chars: str = " .:-=+*#%@") -> str:
        """
        Convert canvas to ASCII art representation (for debugging).

        Args:
            chars: Characters to use for different brightness levels

        Returns:
            Multi-line string representation
        """
        lines = []
        for row in self._pixels:
            line = ""
            for r, g, b in row:
                brightness = int(0.299 * r + 0.587 * g + 0.114 * b)
                char_idx = min(int(brightness / 256.0 * len(chars)), len(chars) - 1)
                line += chars[char_idx]
            lines.append(line)
        return "\n".join(lines)


class PILCanvas(Canvas):
    """Pillow-based canvas for rendering the dashboard to PNG images."""

    def __init__(self, width: int = 1200, height: int = 400):
        self._width = width
        self._height = height
        self._image = Image.new("RGB", (width, height), (0, 0, 0))
        self._draw = ImageDraw.Draw(self._image)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self.fill(0, 0, 0)

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._image.putpixel((x, y), (r, g, b))

    def fill(self, r: int, g: int, b: int) -> None:
        self._image = Image.new("RGB", (self._width, self._height), (r, g, b))
        self._draw = ImageDraw.Draw(self._image)

    def draw_gradient(self, x: int, y: int, w: int, h: int, start: RGB, end: RGB) -> None:
        # Draw anti-diagonals on a square tile, then stretch it to the rectangle
        if w <= 0 or h <= 0:
            return
        side = max(w, h)
        square = Image.new("RGB", (side, side))
        square_draw = ImageDraw.Draw(square)
        steps = 2 * side - 1
        for i in range(steps):
            square_draw.line([(i, 0), (0, i)], fill=blend(start, end, i / max(steps - 1, 1)))
        self._image.paste(square.resize((w, h)), (x, y))

    def fill_rect(self, x: int, y: int, w: int, h: int, color: RGB) -> None:
        if w <= 0 or h <= 0:
            return
        self._draw.rectangle([(x, y), (x + w - 1, y + h - 1)], fill=color)

    def draw_text(self, x: int, y: int, text: str, r: int, g: int, b: int, font_size: int = 10) -> None:
        try:
            font = ImageFont.load_default(size=font_size)
        except TypeError:
            # Pillow < 10.1 has no sized default font
            font = ImageFont.load_default()
        self._draw.text((x, y), text, fill=(r, g, b), font=font)

    def save(self, filename: str) -> None:
        """Save canvas to a PNG file."""
        self._image.save(filename)

    def get_image(self) -> Image.Image:
        """Get the PIL Image object (for advanced usage)."""
        return self._image
