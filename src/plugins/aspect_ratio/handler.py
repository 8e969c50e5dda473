# -----------------------------------------------------------------------------
# ASPECT RATIO PLUGIN
# -----------------------------------------------------------------------------
# Fixed aspect ratio boxes for embeds and images.
# -----------------------------------------------------------------------------


class AspectRatioPlugin:
    """Adds aspect-auto, aspect-square and aspect-video."""

    name = "aspect_ratio"
    description = "Aspect ratio utilities for media boxes"

    def utilities(self) -> dict[str, list[str]]:
        return {
            "aspect-auto": ["aspect-ratio: auto"],
            "aspect-square": ["aspect-ratio: 1 / 1"],
            "aspect-video": ["aspect-ratio: 16 / 9"],
        }


plugin = AspectRatioPlugin()
