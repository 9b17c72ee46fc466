# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

# Neutral gray for events without a color
DEFAULT_EVENT_COLOR = "#d1d5db"

# Style for the current-week column in terminal views
CURRENT_WEEK_STYLE = "bold dark_cyan"
PAST_WEEK_STYLE = "bright_black"


class EventPreset(TypedDict):
    label: str
    color: str


# Built-in event types, matched by exact label
EVENT_PRESETS: list[EventPreset] = [
    {"label": "Begins", "color": "#93c5fd"},
    {"label": "Start", "color": "#93c5fd"},
    {"label": "Complete", "color": "#86efac"},
    {"label": "Finish", "color": "#86efac"},
    {"label": "Departs", "color": "#fcd34d"},
    {"label": "Arrive", "color": "#c4b5fd"},
    {"label": "Arrive to US", "color": "#c4b5fd"},
    {"label": "Installation", "color": "#5eead4"},
]

COLOR_PALETTE = [
    "#93c5fd",  # light blue
    "#86efac",  # light green
    "#fcd34d",  # yellow
    "#c4b5fd",  # light purple
    "#5eead4",  # teal
    "#fca5a5",  # light red
    "#fdba74",  # orange
    "#f9a8d4",  # pink
    DEFAULT_EVENT_COLOR,
]

# Series colors for category breakdowns, reused in order
CHART_COLORS = [
    "#14b8a6",
    "#3b82f6",
    "#8b5cf6",
    "#f59e0b",
    "#ef4444",
    "#22c55e",
    "#ec4899",
    "#06b6d4",
    "#f97316",
    "#6366f1",
]

# Ordered (keywords, color) rules; first match wins
_LABEL_COLOR_RULES: list[tuple[tuple[str, ...], str]] = [
    (("begins", "start"), "#93c5fd"),
    (("complete", "finish"), "#86efac"),
    (("departs",), "#fcd34d"),
    (("arrive",), "#c4b5fd"),
    (("installation",), "#5eead4"),
]


def get_event_color(label: Optional[str]) -> str:
    """Derive an event color from keywords in its label.

    Matching is case-insensitive on substrings, so "Construction begins"
    and "Start" share a color. Unmatched labels get the neutral gray.
    """
    lower_label = (label or "").lower()
    for keywords, color in _LABEL_COLOR_RULES:
        if any(keyword in lower_label for keyword in keywords):
            return color
    return DEFAULT_EVENT_COLOR


def find_preset(label: Optional[str]) -> Optional[EventPreset]:
    for preset in EVENT_PRESETS:
        if preset["label"] == label:
            return preset
    return None
