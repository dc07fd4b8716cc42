"""Drawing utilities and layout helpers for the clock display."""
import math
from functools import lru_cache
from PIL import Image, ImageDraw, ImageFont


@lru_cache(maxsize=16)
def _load_font(size, bold):
    try:
        # Try to load DejaVu fonts (commonly available on Raspberry Pi)
        font_name = "DejaVuSans-Bold.ttf" if bold else "DejaVuSans.ttf"
        font_path = f"/usr/share/fonts/truetype/dejavu/{font_name}"
        return ImageFont.truetype(font_path, size)
    except OSError:
        # Fallback to default font
        return ImageFont.load_default(size)


class Renderer:
    """Helper class for drawing content on the display."""

    def __init__(self, width=320, height=400):
        self.width = width
        self.height = height
        self.image = None
        self.draw = None

    def create_canvas(self, background=(255, 255, 255)):
        """Create a new blank canvas."""
        self.image = Image.new('RGB', (self.width, self.height), background)
        self.draw = ImageDraw.Draw(self.image)
        return self.image

    def get_font(self, size=12, bold=False):
        """
        Get a font for drawing text.

        Falls back to default font if custom fonts aren't available.
        """
        return _load_font(size, bold)

    def draw_text(self, text, x, y, font_size=12, bold=False, anchor="lt", fill=(0, 0, 0)):
        """
        Draw text on the canvas.

        Args:
            text: Text to draw
            x, y: Position
            font_size: Font size in points
            bold: Use bold font
            anchor: Text anchor point (lt=left-top, mm=middle-middle, etc.)
            fill: RGB colour
        """
        font = self.get_font(font_size, bold)
        self.draw.text((x, y), text, font=font, fill=fill, anchor=anchor)

    def draw_line(self, x1, y1, x2, y2, width=1, fill=(0, 0, 0), round_cap=False):
        """Draw a line, optionally with rounded ends."""
        self.draw.line([(x1, y1), (x2, y2)], fill=fill, width=width)
        if round_cap and width >= 2:
            cap_radius = width / 2
            self.draw_circle(x1, y1, cap_radius, fill=fill)
            self.draw_circle(x2, y2, cap_radius, fill=fill)

    def draw_circle(self, cx, cy, radius, fill=None, outline=None, width=1):
        """Draw a circle given its center and radius."""
        self.draw.ellipse(
            [(cx - radius, cy - radius), (cx + radius, cy + radius)],
            fill=fill,
            outline=outline,
            width=width
        )

    def get_text_size(self, text, font_size=12, bold=False):
        """Get the bounding box size of text."""
        font = self.get_font(font_size, bold)
        bbox = self.draw.textbbox((0, 0), text, font=font)
        return bbox[2] - bbox[0], bbox[3] - bbox[1]

    @staticmethod
    def rotate_point(x, y, cx, cy, degrees):
        """
        Rotate (x, y) clockwise around (cx, cy) in screen coordinates.

        Screen y grows downwards, so a positive angle turns 12 o'clock
        towards 3 o'clock.
        """
        radians = math.radians(degrees)
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        dx = x - cx
        dy = y - cy
        return (
            cx + dx * cos_a - dy * sin_a,
            cy + dx * sin_a + dy * cos_a
        )

    def get_image(self):
        """Get the current image."""
        return self.image
