"""Page navigation, zooming and coordinate display for the picture preview."""

from __future__ import annotations

from typing import Sequence

# Each picture writes six values: unit x, unit y, min x, max x, min y, max y.
_VALUES_PER_PAGE = 6


class PageNavigator:
    """Tracks the picture shown when the preview holds several pages.

    ``visible`` tells whether page navigation is worth showing at all;
    ``previous_enabled`` and ``next_enabled`` tell which moves are possible.
    """

    def __init__(self, num_pages: int = 0) -> None:
        self.current_page = 0
        self.num_pages = 0
        self.visible = False
        self.previous_enabled = False
        self.next_enabled = True
        self.set_num_pages(num_pages)

    def __repr__(self) -> str:
        return (f"PageNavigator(num_pages={self.num_pages}, "
                f"current_page={self.current_page})")

    def _update_enabled(self) -> None:
        self.previous_enabled = self.current_page > 0
        self.next_enabled = self.current_page < self.num_pages - 1

    def previous(self) -> int:
        """Go to the previous page, if any, and return the current page."""
        if self.current_page > 0:
            self.current_page -= 1
        self._update_enabled()
        return self.current_page

    def next(self) -> int:
        """Go to the next page, if any, and return the current page."""
        if self.current_page < self.num_pages - 1:
            self.current_page += 1
        self._update_enabled()
        return self.current_page

    def set_num_pages(self, num_pages: int) -> None:
        """Take a new document with ``num_pages`` pages.

        The current page is kept unless the new document is too short for it,
        in which case navigation starts over at the first page.
        """
        if num_pages < 0:
            raise ValueError("num_pages must not be negative")
        self.num_pages = num_pages
        self.visible = num_pages > 1
        if self.current_page >= num_pages:
            self.current_page = 0
            self.previous_enabled = False
            self.next_enabled = True


def zoom_in_factor(zoom: float) -> float:
    """Return the zoom factor one step larger than ``zoom``."""
    if zoom > 0.99:
        step = 0.5 if zoom > 1.99 else 0.2
    else:
        step = 0.1
    return zoom + step


def zoom_out_factor(zoom: float) -> float:
    """Return the zoom factor one step smaller than ``zoom``."""
    if zoom > 1.01:
        step = 0.5 if zoom > 2.01 else 0.2
    else:
        step = 0.1
    return zoom - step


def best_precision(unit: float) -> int:
    """Return how many decimals make a coordinate in ``unit`` steps significant."""
    if unit <= 0:
        raise ValueError("unit must be positive")
    inverse = 1 / unit
    precision = 0
    while inverse < 1:
        inverse *= 10
        precision += 1
    return precision


def mouse_coordinates(coordinates: Sequence[float], page: int, scene_x: float,
                      scene_y: float, zoom: float = 1.0,
                      precision: int = -1) -> tuple[float, float, int, int] | None:
    """Return the picture coordinates under the mouse, with their precisions.

    ``coordinates`` holds six values per page as recorded during typesetting;
    ``scene_x`` and ``scene_y`` are the mouse position in the zoomed image.
    A negative ``precision`` chooses the best precision for each axis. The
    result is ``(x, y, precision_x, precision_y)``, or ``None`` when no
    coordinates are known for the page (as for 3D plots) or the mouse is
    outside the picture.
    """
    if zoom <= 0:
        raise ValueError("zoom must be positive")
    offset = _VALUES_PER_PAGE * page
    if page < 0 or len(coordinates) < offset + _VALUES_PER_PAGE:
        return None
    unit_x, unit_y, min_x, max_x, min_y, max_y = coordinates[offset:offset + _VALUES_PER_PAGE]
    if not (unit_x > 0 and unit_y > 0):
        return None

    if precision < 0:
        precision_x = best_precision(unit_x)
        precision_y = best_precision(unit_y)
    else:
        precision_x = precision_y = precision

    coord_x = scene_x / zoom + min_x
    coord_y = max_y - scene_y / zoom
    if min_x <= coord_x <= max_x and min_y <= coord_y <= max_y:
        return coord_x / unit_x, coord_y / unit_y, precision_x, precision_y
    return None


def preview_size_hint(screen_width: int) -> tuple[int, int]:
    """Return the preferred ``(width, height)`` of the preview for a screen width."""
    if screen_width > 1200:
        return 500, 400
    if screen_width > 1024:
        return 400, 400
    return 250, 200