import math
from typing import Sequence

from .color import Color


def lerp(start: Color, end: Color, offset: int, span: int) -> Color:
    """Interpolate at ``offset / span`` between two colors.

    Each channel is rounded half up; the arithmetic stays in integers so
    that the halfway points are exact.
    """

    def channel(c1: int, c2: int) -> int:
        return (2 * c1 * span + 2 * (c2 - c1) * offset + span) // (2 * span)

    return Color(channel(start.r, end.r), channel(start.g, end.g),
                 channel(start.b, end.b))


def gradient_colors(stops: Sequence[Color],
                    length: int,
                    phase: int = 0) -> list[Color]:
    """Colors for ``length`` consecutive characters across ``stops``.

    The characters are split into ``len(stops) - 1`` sectors. Within a
    sector the color walks from one stop to the next and bounces back once
    it passes the end, so a phase shift rotates the walk instead of wrapping
    around. A sector runs a little past its end stop before the next one
    starts, which repeats the shared stop at sector boundaries.

    A negative phase walks the stops in reverse order.
    """
    if len(stops) < 2:
        raise ValueError("Gradient requires at least two colors")
    if length <= 0:
        return []
    if phase < 0:
        stops = list(reversed(stops))
        phase = -phase

    sector = max(length // (len(stops) - 1), 1)
    span = max(sector - 1, 1)
    last_segment = len(stops) - 2

    colors = []
    index = 0
    segment = 0
    for _ in range(length):
        if index * 10 > span * 11 and segment < last_segment:
            segment += 1
            index = 0
        offset = (index + phase) % (2 * span)
        if offset > span:
            offset = 2 * span - offset
        colors.append(lerp(stops[segment], stops[segment + 1], offset, span))
        index += 1
    return colors


def rainbow_colors(length: int, phase: int = 0) -> list[Color]:
    """Colors for ``length`` characters sweeping the hue circle once.

    Three sine waves shifted by roughly a third of a turn drive the red,
    green and blue channels.
    """
    if length <= 0:
        return []
    frequency = math.pi * 2 / length
    colors = []
    for i in range(length):
        colors.append(
            Color(
                int(math.sin(frequency * i + 2 + phase) * 127 + 128),
                int(math.sin(frequency * i + 0 + phase) * 127 + 128),
                int(math.sin(frequency * i + 4 + phase) * 127 + 128),
            ))
    return colors
