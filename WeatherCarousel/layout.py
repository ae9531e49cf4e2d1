"""Layout and rendering logic for the dashboard - pure functions for testability."""
from typing import List, Sequence, Tuple

from canvas import Canvas
from theme import get_temperature_color, get_theme, hex_to_rgb, text_rgb
from weather_data import WeatherRecord

LINE_HEIGHT = 14
TEMPERATURE_BAR = 4


class DrawOp:
    """Represents a drawing operation (for testing/layout calculation)."""
    def __init__(self, op_type: str, **kwargs):
        self.op_type = op_type
        self.kwargs = kwargs

    def __repr__(self) -> str:
        return f"DrawOp({self.op_type!r}, {self.kwargs!r})"


def get_condition_text(record: WeatherRecord) -> str:
    """
    Get the line of text describing a record's condition.

    Uses the provider's description when there is one, otherwise the
    condition's display name.

    Args:
        record: Weather record

    Returns:
        Condition string (e.g., "Light rain", "Cloudy")
    """
    if record.description:
        return record.description[:1].upper() + record.description[1:]
    return get_theme(record.condition).name


def slot_bounds(index: int, count: int, extent: int, offset: float = 0.0) -> Tuple[int, int]:
    """
    Start and end pixel of a city's slot along the carousel axis.

    Args:
        index: Position of the city
        count: Number of cities
        extent: Container size along the axis
        offset: Drag offset in city-slot units

    Returns:
        (start, end) with end exclusive
    """
    slot = extent / count
    shift = offset * slot
    return int(round(index * slot + shift)), int(round((index + 1) * slot + shift))


def calculate_layout(
    records: Sequence[WeatherRecord],
    width: int = 1200,
    height: int = 400,
    vertical: bool = False,
    offset: float = 0.0
) -> List[DrawOp]:
    """
    Calculate layout operations for the dashboard.

    Cities get equal slots side by side (stacked when vertical). Every slot
    is painted with its condition's gradient first. A temperature bar along
    the slot edge follows, then icon and text ops in the condition's text
    color.

    Args:
        records: Records to display, in display order
        width: Canvas width
        height: Canvas height
        vertical: Stack cities top to bottom (narrow screens)
        offset: Drag offset in city-slot units

    Returns:
        List of DrawOp objects representing what to draw
    """
    if not records:
        return []

    count = len(records)
    extent = height if vertical else width
    backgrounds: List[DrawOp] = []
    overlays: List[DrawOp] = []

    for index, record in enumerate(records):
        start, end = slot_bounds(index, count, extent, offset)
        if vertical:
            x, y, w, h = 0, start, width, end - start
        else:
            x, y, w, h = start, 0, end - start, height

        theme = get_theme(record.condition)
        primary, secondary = theme.gradient_stops
        backgrounds.append(DrawOp(
            "gradient",
            city_id=record.id,
            x=x, y=y, w=w, h=h,
            start=primary,
            end=secondary
        ))

        # Thin strip along the slot edge, colored by temperature band
        if vertical:
            bar = (x + w - TEMPERATURE_BAR, y, TEMPERATURE_BAR, h)
        else:
            bar = (x, y + h - TEMPERATURE_BAR, w, TEMPERATURE_BAR)
        overlays.append(DrawOp(
            "temperature_bar",
            city_id=record.id,
            x=bar[0], y=bar[1], w=bar[2], h=bar[3],
            color=hex_to_rgb(get_temperature_color(record.temperature))
        ))

        r, g, b = text_rgb(record.condition)
        lines = [
            record.abbreviation,
            f"{record.temperature}°",
            get_condition_text(record),
            f"Feels {record.feels_like}°",
            f"{record.humidity}% {record.wind_speed}km/h",
        ]
        if vertical:
            # One row per city: everything on a single line
            text_x, text_y = x + 8, y + max((h - LINE_HEIGHT) // 2, 0)
            overlays.append(DrawOp("icon", city_id=record.id, icon=theme.icon, x=text_x, y=text_y, r=r, g=g, b=b))
            overlays.append(DrawOp(
                "text", city_id=record.id, text="  ".join(lines),
                x=text_x + 4 * LINE_HEIGHT, y=text_y, r=r, g=g, b=b
            ))
        else:
            top = max((h - LINE_HEIGHT * (len(lines) + 1)) // 2, 0)
            overlays.append(DrawOp("icon", city_id=record.id, icon=theme.icon, x=x + 4, y=top, r=r, g=g, b=b))
            for line_no, text in enumerate(lines, start=1):
                overlays.append(DrawOp(
                    "text", city_id=record.id, text=text,
                    x=x + 4, y=top + line_no * LINE_HEIGHT, r=r, g=g, b=b
                ))

    return backgrounds + overlays


def render_dashboard(
    canvas: Canvas,
    records: Sequence[WeatherRecord],
    vertical: bool = False,
    offset: float = 0.0
) -> None:
    """
    Render the dashboard onto a canvas.

    Args:
        canvas: Canvas instance (image or fake)
        records: Records to display
        vertical: Stack cities top to bottom
        offset: Drag offset in city-slot units
    """
    canvas.clear()

    for op in calculate_layout(records, canvas.width, canvas.height, vertical, offset):
        kw = op.kwargs
        if op.op_type == "gradient":
            canvas.draw_gradient(kw["x"], kw["y"], kw["w"], kw["h"], kw["start"], kw["end"])
        elif op.op_type == "temperature_bar":
            canvas.fill_rect(kw["x"], kw["y"], kw["w"], kw["h"], kw["color"])
        elif op.op_type == "icon":
            canvas.draw_text(kw["x"], kw["y"], f"[{kw['icon']}]", kw["r"], kw["g"], kw["b"])
        elif op.op_type == "text":
            canvas.draw_text(kw["x"], kw["y"], kw["text"], kw["r"], kw["g"], kw["b"])
