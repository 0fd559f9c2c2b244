"""View state management for Cosmos Voyager."""

import enum


class ViewState(enum.Enum):
    """Top-level views."""

    PLANET_VIEW = "planet_view"
    STAR_MAP = "star_map"
