# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used by SmartCLI output.

`OneColors` follows the One Dark palette. Members ending in `_b` are bold variants.
`get_one_theme()` maps the semantic style names used in rendering (`flag`, `value`,
`error`, ...) onto the palette.
"""
from rich.theme import Theme


class OneColors:
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"

    DARK_RED_b = f"bold {DARK_RED}"
    GREEN_b = f"bold {GREEN}"
    CYAN_b = f"bold {CYAN}"
    BLUE_b = f"bold {BLUE}"


def get_one_theme() -> Theme:
    """Return the Rich theme used by the shared console."""
    return Theme(
        {
            "flag": OneColors.CYAN_b,
            "value": OneColors.GREEN,
            "muted": OneColors.COMMENT_GREY,
            "error": OneColors.DARK_RED_b,
            "error.kind": OneColors.LIGHT_YELLOW,
            "success": OneColors.GREEN_b,
            "usage": OneColors.BLUE_b,
        }
    )
