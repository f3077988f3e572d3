"""Style presets accepted by the Stability text-to-image endpoint."""

from enum import Enum


class StylePreset(str, Enum):
    """Closed set of style identifiers.

    Values are the exact strings sent as ``style_preset`` on the wire.
    """

    THREE_D_MODEL = "3d-model"
    ANALOG_FILM = "analog-film"
    ANIME = "anime"
    CINEMATIC = "cinematic"
    COMIC_BOOK = "comic-book"
    DIGITAL_ART = "digital-art"
    ENHANCE = "enhance"
    FANTASY_ART = "fantasy-art"
    PIXEL_ART = "pixel-art"

    @property
    def label(self) -> str:
        """Human-readable name shown in the style dropdown."""
        return STYLE_PRESET_LABELS[self]


# Every member must have an entry (checked in tests/unit/test_presets.py)
STYLE_PRESET_LABELS: dict[StylePreset, str] = {
    StylePreset.THREE_D_MODEL: "3D Model",
    StylePreset.ANALOG_FILM: "Analog Film",
    StylePreset.ANIME: "Anime",
    StylePreset.CINEMATIC: "Cinematic",
    StylePreset.COMIC_BOOK: "Comic Book",
    StylePreset.DIGITAL_ART: "Digital Art",
    StylePreset.ENHANCE: "Enhance",
    StylePreset.FANTASY_ART: "Fantasy Art",
    StylePreset.PIXEL_ART: "Pixel Art",
}

DEFAULT_STYLE_PRESET = StylePreset.ENHANCE


def preset_choices() -> list[tuple[str, str]]:
    """Return (label, value) pairs in declaration order for dropdowns."""
    return [(preset.label, preset.value) for preset in StylePreset]
