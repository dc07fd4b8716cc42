"""Configuration management for the clock."""
import yaml
from pathlib import Path

from clockface.clock.palette import Palette, get_palette


class Config:
    """Handles loading and accessing configuration settings."""

    def __init__(self, config_path=None):
        if config_path is None:
            # Default to config/config.yaml relative to project root
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "config.yaml"
            self.required = False
        else:
            self.required = True

        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self):
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            if self.required:
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
            # Built-in defaults apply when the default file is absent
            return {}

        with open(self.config_path, 'r') as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping: {self.config_path}")
        return data

    def get(self, key_path, default=None):
        """
        Get configuration value using dot notation.

        Example: config.get('clock.frames_per_second')
        """
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_display_size(self):
        """Get display dimensions as (width, height) tuple."""
        return (
            int(self.get('display.width', 320)),
            int(self.get('display.height', 400))
        )

    def get_display_mode(self):
        """Get display output mode: 'simulation' or 'framebuffer'."""
        mode = self.get('display.mode', 'simulation')
        if mode not in ('simulation', 'framebuffer'):
            raise ValueError(f"Unknown display mode: {mode}")
        return mode

    def get_refresh_interval(self):
        """Get time refresh interval in seconds."""
        return self._positive('clock.refresh_interval_ms', 1000) / 1000

    def get_sweep_period_ms(self):
        """Get the second hand sweep period in milliseconds."""
        return self._positive('clock.sweep_period_ms', 1000)

    def get_frame_interval(self):
        """Get seconds between redraws of the sweep animation."""
        return 1 / self._positive('clock.frames_per_second', 30)

    def get_phase_lock(self) -> bool:
        """Whether the sweep restarts at each new second from the time source."""
        return bool(self.get('clock.phase_lock_seconds', False))

    def get_palette(self) -> Palette:
        """Get the theme palette with any colour overrides applied."""
        return get_palette(
            self.get('theme.palette', 'light'),
            self.get('theme.colors', None)
        )

    def _positive(self, key_path, default):
        value = self.get(key_path, default)
        if not isinstance(value, (int, float)) or isinstance(value, bool) or value <= 0:
            raise ValueError(f"{key_path} must be a positive number, got {value!r}")
        return value
