"""Clock widgets: digital readout and analog face."""
from .base import Widget
from clockface.display.renderer import Renderer

TICK_COUNT = 12
TICK_INNER = 0.9
TICK_WIDTH = 4
PIVOT_RADIUS = 8


class DigitalClockWidget(Widget):
    """Displays the time as HH:MM:SS."""

    def render(self, renderer: Renderer, bounds: tuple) -> None:
        """Render digital time centered in bounds."""
        if self.state is None:
            return

        x, y, width, height = bounds
        font_size = max(10, min(height * 2 // 3, width // 6))
        renderer.draw_text(
            self.state.digital_text,
            x + width // 2,
            y + height // 2,
            font_size=font_size,
            bold=True,
            anchor="mm",
            fill=self.state.palette.primary
        )


class AnalogClockWidget(Widget):
    """Analog face with hour, minute and sweeping second hands."""

    # (length as fraction of radius, stroke width, palette role)
    HOUR_HAND = (0.5, 8, 'primary')
    MINUTE_HAND = (0.7, 6, 'secondary')
    SECOND_HAND = (0.8, 2, 'tertiary')

    def render(self, renderer: Renderer, bounds: tuple) -> None:
        """Render dial, ticks, hands and pivot in that order."""
        if self.state is None:
            return

        x, y, width, height = bounds
        cx = x + width / 2
        cy = y + height / 2
        radius = min(width, height) / 2
        if radius <= 0:
            return
        palette = self.state.palette

        # Dial
        renderer.draw_circle(cx, cy, radius, fill=palette.surface)

        # Hour ticks, 30 degrees apart starting at 12 o'clock
        for i in range(TICK_COUNT):
            angle = i * 360 / TICK_COUNT
            start = renderer.rotate_point(cx, cy - radius * TICK_INNER, cx, cy, angle)
            end = renderer.rotate_point(cx, cy - radius, cx, cy, angle)
            renderer.draw_line(*start, *end, width=TICK_WIDTH,
                               fill=palette.on_surface, round_cap=True)

        self._draw_hand(renderer, cx, cy, radius, self.state.hour_angle, self.HOUR_HAND)
        self._draw_hand(renderer, cx, cy, radius, self.state.minute_angle, self.MINUTE_HAND)
        self._draw_hand(renderer, cx, cy, radius, self.state.second_angle, self.SECOND_HAND)

        # Center pivot on top of the hands
        renderer.draw_circle(cx, cy, PIVOT_RADIUS, fill=palette.primary)

    def _draw_hand(self, renderer, cx, cy, radius, angle, hand):
        length, stroke, role = hand
        tip = renderer.rotate_point(cx, cy - radius * length, cx, cy, angle)
        renderer.draw_line(cx, cy, *tip, width=stroke,
                           fill=getattr(self.state.palette, role), round_cap=True)
