"""Dashboard state: loading/refresh/offline handling and drag-to-offset gestures."""
import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from weather_data import WeatherRecord, round_half_up

REFRESH_INTERVAL_SECONDS = 300
MOBILE_BREAKPOINT = 768
OFFSET_STEP = 0.1

OFFLINE_MESSAGE = "No internet connection"
LOAD_FAILED_MESSAGE = "Failed to load weather data"


@dataclass(frozen=True)
class Viewport:
    """Size of the dashboard container and of the window holding it."""
    width: float
    height: float
    window_width: float

    @property
    def is_narrow(self) -> bool:
        # Narrow viewports stack cities vertically
        return self.window_width < MOBILE_BREAKPOINT


class DashboardController:
    """
    Holds the records shown on the dashboard and reacts to UI events.

    All methods are meant to be called from a single event loop. Every load
    replaces the whole record list.
    """

    def __init__(self, client):
        """
        Initialize controller.

        Args:
            client: Object with a fetch() method returning List[WeatherRecord]
        """
        self.client = client
        self.records: List[WeatherRecord] = []
        self.is_loading = True
        self.is_refreshing = False
        self.is_online = True
        self.error: Optional[str] = None

        self.is_dragging = False
        self.drag_offset = 0.0
        self._last_offset = 0.0
        self._start_x = 0.0
        self._start_y = 0.0

    # Data loading

    def mount(self) -> None:
        """Initial load, with the loading flag shown."""
        self._load(show_loading=True)

    def on_timer(self) -> bool:
        """
        Periodic refresh tick.

        Returns:
            True if a reload was performed
        """
        if self.is_dragging or not self.is_online:
            logging.debug("Skipping auto-refresh (dragging=%s online=%s)", self.is_dragging, self.is_online)
            return False
        self._load(show_loading=False)
        return True

    def refresh(self) -> bool:
        """
        Manual refresh.

        Returns:
            True if a reload was performed
        """
        if not self.is_online:
            self.error = OFFLINE_MESSAGE
            return False

        self.is_refreshing = True
        try:
            self._load(show_loading=False)
        finally:
            self.is_refreshing = False
        return True

    def set_online(self, online: bool) -> None:
        if online != self.is_online:
            logging.info("Connectivity changed: %s", "online" if online else "offline")
        self.is_online = online

    def _load(self, show_loading: bool) -> None:
        try:
            if show_loading:
                self.is_loading = True
            self.error = None
            self.records = list(self.client.fetch())
        except Exception as exc:
            logging.error("Failed to load weather data: %s", exc, exc_info=True)
            self.error = LOAD_FAILED_MESSAGE
        finally:
            if show_loading:
                self.is_loading = False

    def last_updated_label(self) -> str:
        """"HH:MM" of the first record's timestamp, or of now if there are none."""
        if self.records:
            return self.records[0].last_updated.astimezone().strftime("%H:%M")
        return time.strftime("%H:%M")

    # Gestures

    def pointer_down(self, x: float, y: float) -> None:
        self.is_dragging = True
        self._start_x = x
        self._start_y = y
        self._last_offset = self.drag_offset

    def pointer_move(self, x: float, y: float, viewport: Viewport) -> None:
        if not self.is_dragging:
            return
        self._update_offset(x - self._start_x, y - self._start_y, viewport)

    def pointer_up(self) -> None:
        self.is_dragging = False
        self.drag_offset = 0.0
        self._last_offset = 0.0

    # Touch events behave exactly like pointer events
    touch_start = pointer_down
    touch_move = pointer_move
    touch_end = pointer_up
    pointer_leave = pointer_up

    def _update_offset(self, delta_x: float, delta_y: float, viewport: Viewport) -> None:
        count = len(self.records)
        if viewport.is_narrow:
            extent, delta = viewport.height, delta_y
        else:
            extent, delta = viewport.width, delta_x
        if count == 0 or extent <= 0:
            return

        city_size = extent / count
        city_change = round_half_up(delta / city_size)
        self.drag_offset = self._last_offset - city_change * OFFSET_STEP
