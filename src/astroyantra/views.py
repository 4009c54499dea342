"""Schematic / embedded-3D view switching and the 3D viewer embeds."""

from enum import Enum

from astroyantra.models import InstrumentKind
from astroyantra.renderers.scene import VectorScene


class ViewMode(Enum):
    SCHEMATIC = "2d"
    EMBEDDED_MODEL = "3d"


class ViewModeCoordinator:
    """Tracks which of the two presentation surfaces is visible.

    Owns no computation. Entering SCHEMATIC re-presents the attached scene.
    """

    def __init__(self, mode: ViewMode = ViewMode.SCHEMATIC) -> None:
        self.mode = mode
        self._scene: VectorScene | None = None

    def attach_scene(self, scene: VectorScene) -> None:
        self._scene = scene

    def set_mode(self, mode: ViewMode) -> None:
        self.mode = mode
        if mode is ViewMode.SCHEMATIC and self._scene is not None:
            self._scene.present()

    def is_visible(self, mode: ViewMode) -> bool:
        return self.mode is mode


_SKETCHFAB_MODELS: dict[InstrumentKind, tuple[str, str]] = {
    InstrumentKind.SAMRAT: ("Laghu Samrat Yantra", "2064afec3c694c2098dc47c58934cf9d"),
    InstrumentKind.MISRA: ("Jantar Mantar", "88c5c4e89928470a8f7e54bf1be13504"),
}


def embed_url(instrument: InstrumentKind) -> str:
    """Fixed Sketchfab embed URL for an instrument's reference model."""
    _, model_id = _SKETCHFAB_MODELS[instrument]
    return (
        f"https://sketchfab.com/models/{model_id}/embed"
        "?autospin=1&autostart=1&ui_theme=dark"
    )


def embed_html(instrument: InstrumentKind) -> str:
    """Full-size iframe markup for the embedded 3D viewer."""
    title, _ = _SKETCHFAB_MODELS[instrument]
    return (
        f'<iframe title="{title}" src="{embed_url(instrument)}"'
        ' allow="autoplay; fullscreen; xr-spatial-tracking" allowfullscreen'
        ' style="width:100%; height:100%; border:none;"></iframe>'
    )
