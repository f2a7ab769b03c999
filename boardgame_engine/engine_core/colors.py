"""
Color Assigner - stable category colors for one chart
"""

from typing import Dict, Iterator, Mapping, Optional, Sequence


class ColorAssigner:
    """
    Hands out palette colors to category names, round-robin.

    A name keeps the first color it was given for the lifetime of the
    assigner. The next color is palette[len(assigned) % len(palette)], so
    preset entries also advance the rotation.
    """

    def __init__(
        self,
        palette: Sequence[str],
        presets: Optional[Mapping[str, str]] = None
    ):
        if not palette:
            raise ValueError("Palette must contain at least one color")
        self.palette = tuple(palette)
        self._colors: Dict[str, str] = dict(presets or {})

    def color_for(self, name: str) -> str:
        """Return the color for name, assigning the next one on first request."""
        color = self._colors.get(name)
        if color is None:
            color = self.palette[len(self._colors) % len(self.palette)]
            self._colors[name] = color
        return color

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a color without assigning one."""
        return self._colors.get(name, default)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._colors)

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return f"ColorAssigner(palette={len(self.palette)} colors, assigned={len(self._colors)})"
