#!/usr/bin/env python3
"""Rendering options passed explicitly to every chart and table writer."""

from dataclasses import dataclass, field
from itertools import cycle
from types import MappingProxyType

from ..utils.constants import CATEGORY_COLORS, GROUP_COLORS


@dataclass(frozen=True)
class RenderConfig:
    """Figure and table output settings.

    Attributes:
        dpi: Raster resolution for saved figures.
        formats: File formats written for every chart (one file each).
        float_format: printf-style format for floats in written tables.
        top_genera: Number of genera shown in the genus panels.
        figure_scale: Multiplier applied to every figure size.
        palette: Read-only colors for categories and lumped groups; other
            labels get colors from GROUP_COLORS.
    """

    dpi: int = 300
    formats: tuple = ('png', 'pdf')
    float_format: str = '%.2f'
    top_genera: int = 25
    figure_scale: float = 1.0
    palette: dict = field(default_factory=lambda: dict(CATEGORY_COLORS))

    def __post_init__(self):
        object.__setattr__(self, 'palette', MappingProxyType(dict(self.palette)))

    def figsize(self, width, height):
        return (width * self.figure_scale, height * self.figure_scale)

    def colors_for(self, labels):
        """Stable label -> color mapping for a sequence of labels."""
        fallback = cycle(GROUP_COLORS)
        colors = {}
        for label in labels:
            colors[label] = self.palette[label] if label in self.palette else next(fallback)
        return colors
