"""Base widget class for the clock screen."""
from abc import ABC, abstractmethod
from typing import Optional

from clockface.clock.display_state import DisplayState
from clockface.display.renderer import Renderer


class Widget(ABC):
    """Base class for all clock screen widgets."""

    def __init__(self):
        self.state: Optional[DisplayState] = None

    @abstractmethod
    def render(self, renderer: Renderer, bounds: tuple) -> None:
        """
        Render the widget content.

        Args:
            renderer: Renderer object to draw with
            bounds: (x, y, width, height) tuple defining the widget area
        """
        pass

    def update_data(self, state: DisplayState) -> bool:
        """
        Take the display state for the next frame.

        Returns:
            True if what this widget draws changed, False otherwise
        """
        changed = state != self.state
        self.state = state
        return changed

    def get_name(self) -> str:
        """Get widget name."""
        return self.__class__.__name__.replace('Widget', '').lower()
