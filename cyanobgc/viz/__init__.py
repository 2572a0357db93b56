"""Visualization modules for BGC analysis pipeline."""

from .config import RenderConfig
from .charts import (
    save_figure,
    plot_length_histogram,
    plot_category_bars,
    plot_lumped_bars,
    plot_genus_density,
    plot_scaffold_hexbin,
    plot_filter_comparison
)
from .composite import plot_composite_figure
from .tables import write_table, format_length_stats

__all__ = [
    # config
    'RenderConfig',
    # charts
    'save_figure',
    'plot_length_histogram',
    'plot_category_bars',
    'plot_lumped_bars',
    'plot_genus_density',
    'plot_scaffold_hexbin',
    'plot_filter_comparison',
    # composite
    'plot_composite_figure',
    # tables
    'write_table',
    'format_length_stats',
]
