#!/usr/bin/env python3
"""Multi-panel publication figure."""

import matplotlib.pyplot as plt

from .charts import (
    draw_genus_density, draw_length_histogram, draw_lumped_bars, draw_scaffold_hexbin,
    save_figure, top_genera
)


def _panel_label(ax, label):
    ax.text(-0.12, 1.05, label, transform=ax.transAxes, fontsize=16,
            fontweight='bold', va='bottom', ha='left')


def plot_composite_figure(regions, ranked, lumped, group_order, density, genome_totals,
                          genome_counts, outdir, config):
    """Panels A-D: combination bars, length histogram, genus density, hexbin."""
    fig, axes = plt.subplots(2, 2, figsize=config.figsize(16, 13), facecolor='white')
    (ax_bars, ax_hist), (ax_genus, ax_hex) = axes

    draw_lumped_bars(ax_bars, ranked, lumped, config)
    draw_length_histogram(ax_hist, regions, lumped, config, legend=False)

    genera = top_genera(genome_totals, density, min(config.top_genera, 15))
    draw_genus_density(ax_genus, density, genera, group_order, config)

    # Contig-edge BGCs are the double-counting signal, so panel D shows those
    hb = draw_scaffold_hexbin(ax_hex, genome_counts, True)
    if hb is not None:
        fig.colorbar(hb, ax=ax_hex, label='Genomes')

    for ax, label in zip((ax_bars, ax_hist, ax_genus, ax_hex), 'ABCD'):
        _panel_label(ax, label)

    plt.tight_layout()
    return save_figure(fig, outdir, 'composite_figure', config)
