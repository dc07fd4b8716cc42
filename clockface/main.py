#!/usr/bin/env python3
"""Main application for the clock display."""
import asyncio
import signal
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from clockface.clock.time_source import FixedTimeSource, SystemTimeSource, TimeOfDay
from clockface.display.driver import DisplayDriver
from clockface.display.renderer import Renderer
from clockface.display.screen import ClockScreen
from clockface.utils.config import Config


class ClockApp:
    """Main clock application."""

    def __init__(self, config_path=None, fixed_time=None):
        """Initialize the clock."""
        print("Initializing clock...")

        # Load configuration
        self.config = Config(config_path)
        if self.config.config_path.exists():
            print(f"Configuration loaded from {self.config.config_path}")
        else:
            print("No configuration file, using defaults")

        # Initialize display
        width, height = self.config.get_display_size()
        self.display = DisplayDriver(
            width,
            height,
            mode=self.config.get_display_mode(),
            output_path=self.config.get('display.output_path'),
            framebuffer_device=self.config.get('display.framebuffer_device', '/dev/fb0')
        )
        self.renderer = Renderer(width, height)

        if fixed_time is not None:
            time_source = FixedTimeSource(fixed_time)
            print(f"Showing fixed time {fixed_time.hour:02d}:{fixed_time.minute:02d}:{fixed_time.second:02d}")
        else:
            time_source = SystemTimeSource()

        self.screen = ClockScreen(
            time_source,
            self.renderer,
            self.display,
            self.config.get_palette(),
            refresh_interval=self.config.get_refresh_interval(),
            frame_interval=self.config.get_frame_interval(),
            sweep_period_ms=self.config.get_sweep_period_ms(),
            phase_lock=self.config.get_phase_lock()
        )
        print(f"Redrawing every {self.screen.sweep_task.interval * 1000:.0f} ms")

        self.stop_event = None

    def run_once(self):
        """Render a single frame."""
        self.display.init()
        self.screen.run_once()

    async def run(self, duration=None):
        """
        Run the clock until stopped.

        Args:
            duration: Stop after this many seconds (None runs until a signal)
        """
        print("\n" + "=" * 50)
        print("Starting clock")
        print("=" * 50)

        self.stop_event = asyncio.Event()
        loop = asyncio.get_running_loop()

        # Setup signal handlers for graceful shutdown
        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(signum, self.stop)
            except (NotImplementedError, RuntimeError):
                # Not available on this platform or outside the main thread
                pass

        self.display.init()
        self.screen.show()
        print("Press Ctrl+C to exit")

        try:
            if duration is None:
                await self.stop_event.wait()
            else:
                try:
                    await asyncio.wait_for(self.stop_event.wait(), timeout=duration)
                except asyncio.TimeoutError:
                    pass
        finally:
            await self.screen.hide()
            for signum in (signal.SIGINT, signal.SIGTERM):
                try:
                    loop.remove_signal_handler(signum)
                except (NotImplementedError, RuntimeError):
                    pass
            self.shutdown()

    def stop(self):
        """Ask the running loop to stop."""
        if self.stop_event is not None:
            self.stop_event.set()

    def shutdown(self):
        """Clean shutdown."""
        print("Shutting down clock...")
        self.display.close()
        print("Goodbye!")


def parse_time(value):
    """argparse type for --time."""
    import argparse

    try:
        return TimeOfDay.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def main(argv=None):
    """Entry point."""
    import argparse

    parser = argparse.ArgumentParser(description='Analog and digital clock')
    parser.add_argument(
        '--config',
        type=str,
        help='Path to configuration file',
        default=None
    )
    parser.add_argument(
        '--once',
        action='store_true',
        help='Render one frame and exit (for testing)'
    )
    parser.add_argument(
        '--duration',
        type=float,
        help='Stop after this many seconds',
        default=None
    )
    parser.add_argument(
        '--time',
        type=parse_time,
        help='Show a fixed time (HH:MM:SS) instead of the system clock',
        default=None
    )

    args = parser.parse_args(argv)

    app = ClockApp(args.config, fixed_time=args.time)

    if args.once:
        # Single frame for testing
        app.run_once()
        app.shutdown()
    else:
        # Normal operation
        try:
            asyncio.run(app.run(args.duration))
        except KeyboardInterrupt:
            print("\n\nShutdown requested...")

    return 0


if __name__ == '__main__':
    sys.exit(main())
