"""The clock screen: owns the refresh and sweep tasks and draws frames."""
import time
from typing import Callable, List, Optional

from clockface.clock.display_state import DisplayState, derive_display_state, phase_for
from clockface.clock.palette import Palette
from clockface.clock.time_source import TimeOfDay, TimeSourceError
from clockface.display.renderer import Renderer
from clockface.utils.scheduler import PeriodicTask
from clockface.widgets.base import Widget
from clockface.widgets.clock import AnalogClockWidget, DigitalClockWidget

# Share of the screen height given to the digital readout
DIGITAL_HEIGHT = 0.2
FACE_PADDING = 16


class ClockScreen:
    """
    Digital readout above an analog face.

    Two periodic tasks drive the screen while it is visible: one re-reads
    the time source, the other advances the second hand sweep and redraws.
    Both are started by show() and stopped by hide().
    """

    def __init__(self, time_source, renderer: Renderer, driver, palette: Palette,
                 refresh_interval=1.0, frame_interval=1 / 30, sweep_period_ms=1000,
                 phase_lock=False, monotonic: Callable[[], float] = time.monotonic):
        self.time_source = time_source
        self.renderer = renderer
        self.driver = driver
        self.palette = palette
        self.sweep_period_ms = sweep_period_ms
        self.phase_lock = phase_lock
        self.monotonic = monotonic

        self.digital = DigitalClockWidget()
        self.analog = AnalogClockWidget()
        self.widgets: List[Widget] = [self.digital, self.analog]

        self.time_of_day: Optional[TimeOfDay] = None
        self.state: Optional[DisplayState] = None
        self.sweep_origin = monotonic()
        self.visible = False
        self.read_failures = 0

        self.refresh_task = PeriodicTask('time-refresh', refresh_interval,
                                         self.refresh_time, immediate=False)
        self.sweep_task = PeriodicTask('sweep', frame_interval, self.draw_frame)

    def show(self) -> None:
        """Start both tasks. Must be called from inside the event loop."""
        if self.visible:
            return

        self.restart_sweep()
        self.refresh_time()
        self.refresh_task.start()
        self.sweep_task.start()
        self.visible = True
        print("Clock screen shown")

    async def hide(self) -> None:
        """Stop both tasks and wait for them to finish."""
        await self.refresh_task.stop()
        await self.sweep_task.stop()
        if self.visible:
            print("Clock screen hidden")
        self.visible = False

    def restart_sweep(self) -> None:
        """Put the second hand sweep back at 0 degrees."""
        self.sweep_origin = self.monotonic()

    def current_phase(self) -> float:
        """Position within the current sweep cycle, in [0, 1)."""
        elapsed_ms = (self.monotonic() - self.sweep_origin) * 1000
        return phase_for(elapsed_ms, self.sweep_period_ms)

    def refresh_time(self) -> bool:
        """
        Re-read the time source.

        Returns:
            True if a new time was read. On failure the last good time is
            kept and False is returned.
        """
        try:
            now = self.time_source.now()
        except TimeSourceError as e:
            self.read_failures += 1
            print(f"Error reading time, keeping last good time: {e}")
            return False

        if self.phase_lock and self.time_of_day is not None and now.second != self.time_of_day.second:
            self.restart_sweep()

        self.time_of_day = now
        return True

    def draw_frame(self, phase: Optional[float] = None) -> bool:
        """
        Derive the display state for the current sweep phase and draw it.

        Returns:
            True if a frame was presented, False if there was no time yet
            or nothing on screen changed since the last frame
        """
        if self.time_of_day is None:
            return False

        if phase is None:
            phase = self.current_phase()

        self.state = derive_display_state(self.time_of_day, phase, self.palette)
        # List, not generator: every widget must see the new state
        changed = [widget.update_data(self.state) for widget in self.widgets]
        if not any(changed):
            return False

        self.render(self.renderer)
        self.driver.display_image(self.renderer.get_image())
        return True

    def render(self, renderer: Renderer) -> None:
        """Lay out and draw both widgets on a fresh canvas."""
        renderer.create_canvas(self.palette.background)

        digital_height = int(renderer.height * DIGITAL_HEIGHT)
        self.digital.render(renderer, (0, 0, renderer.width, digital_height))

        face_size = min(renderer.width, renderer.height - digital_height) - 2 * FACE_PADDING
        if face_size <= 0:
            # No room for the face on very small displays
            return

        face_x = (renderer.width - face_size) // 2
        face_y = digital_height + (renderer.height - digital_height - face_size) // 2
        self.analog.render(renderer, (face_x, face_y, face_size, face_size))

    def run_once(self) -> bool:
        """Read the time and draw a single frame with the sweep at 0 degrees."""
        self.refresh_time()
        return self.draw_frame(phase=0.0)
