# SPDX-License-Identifier: MIT

from weekline.color import EVENT_PRESETS
from weekline.service.category import get_all_categories


def complete_category(incomplete: str) -> list[str]:
    """Return list of existing categories for shell completion."""

    return [
        category for category in get_all_categories() if category.startswith(incomplete)
    ]


def complete_preset(incomplete: str) -> list[str]:
    """Return list of event preset labels for shell completion."""
    return [
        preset["label"]
        for preset in EVENT_PRESETS
        if preset["label"].lower().startswith(incomplete.lower())
    ]
