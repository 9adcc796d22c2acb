"""Flower glyph and the per-line colour rule for each device state."""

from rich.text import Text

from sensor_state import DeviceState

FLOWER_LINES = (
    "            .--. ",
    '      .-"-:`    `:-"-.',
    "   .-/     '.  .'     \\-.",
    "  ;__|      _::_      |__;",
    " /`   '.  /` \\/` \\  .'   `\\",
    " |      _ \\      / _      |",
    " \\    /` '.'.  .'.' `\\    /",
    "/ '-._'.  _'./\\.'_  .'_.-' \\",
    "\\ .-' .'`  .'\\//'.  `'. '-. /",
    " /    \\._.'.'  '.'._./    \\",
    " |        /      \\        |",
    " \\.__ .'  \\._/\\_.//  '. __./",
    "  ;  |       ::       |  ;",
    "   '-\\     .'  '.     /-'",
    " jgs  '-.-:_    _:-.-'",
    "            '--'",
)

# Rich style strings
MONITORING_COLOR = "yellow"
ACTIVE_COLOR = "blue"
ADJUSTING_COLOR = "cyan"
CENTER_COLOR = "white"
PETAL_COLOR = "rgb(255,165,0)"
ALERT_COLOR = "red"
BACKGROUND_COLOR = "black"   # Blink "off" frame

# Idle centre: a fixed line plus any line in the band holding the stem marker
CENTER_LINE = 11
CENTER_BAND = range(7, 10)
CENTER_MARKER = " / "


def _blink(color: str, phase: int) -> str:
    return color if phase == 0 else BACKGROUND_COLOR


def is_center_line(index: int, line: str) -> bool:
    return index == CENTER_LINE or (index in CENTER_BAND and CENTER_MARKER in line)


def line_style(index: int, line: str, phase: int, state: DeviceState) -> str:
    """Return the Rich style for one glyph line."""
    if state == DeviceState.MONITORING:
        return MONITORING_COLOR
    if state == DeviceState.ACTIVATING:
        return _blink(ACTIVE_COLOR, phase)
    if state == DeviceState.ADJUSTING:
        return ADJUSTING_COLOR
    if state == DeviceState.IDLE:
        return CENTER_COLOR if is_center_line(index, line) else PETAL_COLOR
    return _blink(ALERT_COLOR, phase)


def style_line(index: int, line: str, phase: int, state: DeviceState) -> Text:
    return Text(line, style=line_style(index, line, phase, state))


def render_flower(state: DeviceState, phase: int, lines=FLOWER_LINES) -> Text:
    """Style every glyph line and join them into one renderable."""
    return Text("\n").join(
        style_line(i, line, phase, state) for i, line in enumerate(lines)
    )
