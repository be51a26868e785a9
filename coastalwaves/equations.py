"""Registry of equation definitions and their pre-rendered SVG images."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

DEFAULT_REGISTRY = Path("scripts/equations.json")
DEFAULT_ASSETS = Path("assets/equations")
BLACK = "rgb(0%, 0%, 0%)"

RGB = tuple[int, int, int]


def _rgb_percent(rgb: RGB) -> str:
    r, g, b = (channel / 255.0 * 100.0 for channel in rgb)
    return f"rgb({r:.1f}%, {g:.1f}%, {b:.1f}%)"


def recolor_svg(svg_text: str, rgb: RGB) -> str:
    """Replace black fills and strokes in an SVG with the given 0-255 colour."""
    return svg_text.replace(BLACK, _rgb_percent(rgb))


@dataclass(frozen=True)
class Equation:
    """An equation with its LaTeX source and explanatory text."""

    id: str
    latex: str
    description: str
    usage: str


class EquationRegistry:
    """Equation definitions keyed by id, with themed SVG lookup."""

    def __init__(self, assets_dir: str | Path = DEFAULT_ASSETS) -> None:
        self.assets_dir = Path(assets_dir)
        self.equations: dict[str, Equation] = {}
        self._svg_cache: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self.equations)

    def __contains__(self, equation_id: object) -> bool:
        return equation_id in self.equations

    def load(self, path: str | Path = DEFAULT_REGISTRY) -> None:
        """Replace the definitions with those in a JSON registry file."""
        registry_path = Path(path)
        if not registry_path.exists():
            raise FileNotFoundError("Equations registry file not found")
        data = json.loads(registry_path.read_text(encoding="utf-8"))
        equations = [Equation(**entry) for entry in data["equations"]]
        self.equations = {equation.id: equation for equation in equations}

    def get(self, equation_id: str) -> Equation | None:
        """The equation with this id, or None."""
        return self.equations.get(equation_id)

    def svg_path(self, equation_id: str) -> Path:
        """Location of the rendered SVG for an equation."""
        return self.assets_dir / f"{equation_id}.svg"

    def themed_svg(self, equation_id: str, rgb: RGB) -> str:
        """SVG text of an equation drawn in the given colour; cached per equation."""
        cached = self._svg_cache.get(equation_id)
        if cached is not None:
            return cached
        path = self.svg_path(equation_id)
        if not path.exists():
            raise FileNotFoundError(f"SVG file not found: {path}")
        svg = recolor_svg(path.read_bytes().decode("utf-8"), rgb)
        self._svg_cache[equation_id] = svg
        return svg