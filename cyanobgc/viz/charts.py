#!/usr/bin/env python3
"""Chart generation functions for BGC visualization."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from ..analysis.classify import lumped_group_order, rank_combinations
from ..utils.constants import BGC_CATEGORIES


def save_figure(fig, outdir, name, config):
    """Write fig in every configured format under outdir/figures and close it."""
    figdir = Path(outdir) / 'figures'
    figdir.mkdir(parents=True, exist_ok=True)

    paths = []
    for fmt in config.formats:
        path = figdir / f'{name}.{fmt}'
        fig.savefig(path, dpi=config.dpi, bbox_inches='tight', facecolor='white')
        paths.append(path)
    plt.close(fig)
    return paths


def _no_data(ax, message):
    ax.text(0.5, 0.5, message, ha='center', va='center', fontsize=14,
            color='#666', transform=ax.transAxes)
    ax.axis('off')


# =============================================================================
# Panel drawing (shared by single charts and the composite figure)
# =============================================================================

def draw_length_histogram(ax, regions, lumped, config, legend=True):
    """Stacked histogram of region length (kb) by lumped group."""
    if regions.empty:
        _no_data(ax, 'No BGC regions')
        return

    order = lumped_group_order(rank_combinations(regions), lumped)
    data = pd.DataFrame({
        'length_kb': regions['length'] / 1000,
        'lumped_group': regions['combination'].map(lumped),
    })

    sns.histplot(data=data, x='length_kb', hue='lumped_group', hue_order=order,
                 palette=config.colors_for(order), multiple='stack', bins=50,
                 edgecolor='white', linewidth=0.3, legend=legend, ax=ax)
    ax.set_xlabel('BGC length (kb)')
    ax.set_ylabel('BGCs')
    if legend and ax.get_legend() is not None:
        ax.get_legend().set_title('BGC category')


def draw_lumped_bars(ax, ranked, lumped, config):
    """One bar per lumped group with its total count."""
    if ranked.empty:
        _no_data(ax, 'No BGC regions')
        return

    order = lumped_group_order(ranked, lumped)
    totals = ranked.groupby(ranked.index.map(lumped)).sum().reindex(order)
    colors = config.colors_for(order)

    bars = ax.bar(range(len(order)), totals.values,
                  color=[colors[g] for g in order], edgecolor='white')
    for bar, value in zip(bars, totals.values):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(), f'{int(value)}',
                ha='center', va='bottom', fontsize=9)

    ax.set_xticks(range(len(order)))
    ax.set_xticklabels(order, rotation=45, ha='right')
    ax.set_ylabel('BGCs')


def top_genera(genome_totals, density, n):
    """The n genera with most genomes that also have a defined density."""
    candidates = genome_totals[genome_totals['genus'].isin(density['genus'])]
    return list(candidates.sort_values(['genome_count', 'genus'],
                                       ascending=[False, True])['genus'].head(n))


def draw_genus_density(ax, density, genera, group_order, config, legend=True):
    """Stacked horizontal bars of BGCs per genome for each genus."""
    if not genera:
        _no_data(ax, 'No genus densities')
        return

    table = density.pivot_table(index='genus', columns='lumped_group', values='density',
                                aggfunc='sum', fill_value=0.0)
    groups = [g for g in group_order if g in table.columns]
    table = table.reindex(index=genera, columns=groups, fill_value=0.0)
    colors = config.colors_for(groups)

    y = np.arange(len(genera))
    left = np.zeros(len(genera))
    for group in groups:
        ax.barh(y, table[group].values, left=left, color=colors[group],
                edgecolor='white', linewidth=0.5, label=group)
        left += table[group].values

    ax.set_yticks(y)
    ax.set_yticklabels(genera, fontstyle='italic')
    ax.set_ylim(len(genera) - 0.5, -0.5)
    ax.set_xlabel('BGCs per genome')
    if legend:
        ax.legend(title='BGC category', fontsize=8, title_fontsize=9, loc='lower right')


def draw_scaffold_hexbin(ax, genome_counts, contig_edge, gridsize=30):
    """Hexbin of scaffold count vs BGCs per genome for one contig-edge flag."""
    subset = genome_counts[genome_counts['contig_edge'] == contig_edge]
    title = 'BGCs on contig edge' if contig_edge else 'BGCs not on contig edge'
    ax.set_title(title)
    if subset.empty:
        _no_data(ax, 'No BGCs')
        return None

    hb = ax.hexbin(subset['num_scaffolds'].clip(lower=1), subset['bgc_count'],
                   gridsize=gridsize, xscale='log', mincnt=1, cmap='viridis')
    ax.set_xlabel('Scaffolds in assembly')
    ax.set_ylabel('BGCs per genome')
    return hb


# =============================================================================
# Charts
# =============================================================================

def plot_length_histogram(regions, lumped, outdir, config):
    """Histogram of BGC length, stacked by lumped category group."""
    fig, ax = plt.subplots(figsize=config.figsize(10, 6), facecolor='white')
    draw_length_histogram(ax, regions, lumped, config)
    ax.set_title('BGC length by category')
    plt.tight_layout()
    return save_figure(fig, outdir, 'bgc_length_histogram', config)


def plot_category_bars(exploded, outdir, config):
    """BGCs per category, split into single-category and hybrid regions."""
    fig, ax = plt.subplots(figsize=config.figsize(9, 6), facecolor='white')

    if exploded.empty:
        _no_data(ax, 'No BGC regions')
    else:
        table = exploded.groupby(['category', 'is_hybrid']).size().unstack(fill_value=0)
        table = table.reindex(columns=[False, True], fill_value=0)
        categories = [c for c in BGC_CATEGORIES if c in table.index]
        table = table.reindex(categories)
        table.columns = ['Single category', 'Hybrid']

        table.plot(kind='bar', stacked=True, ax=ax, color=['#2c5aa0', '#9b59b6'],
                   edgecolor='white', rot=0)
        ax.set_xlabel('')
        ax.set_ylabel('BGCs')
        ax.legend(title='')

    ax.set_title('BGCs per category')
    plt.tight_layout()
    return save_figure(fig, outdir, 'bgc_category_bars', config)


def plot_lumped_bars(ranked, lumped, outdir, config):
    """BGCs per category combination, rare combinations lumped together."""
    fig, ax = plt.subplots(figsize=config.figsize(10, 6), facecolor='white')
    draw_lumped_bars(ax, ranked, lumped, config)
    ax.set_title('BGC category combinations')
    plt.tight_layout()
    return save_figure(fig, outdir, 'bgc_lumped_combinations', config)


def plot_genus_density(density, genome_totals, summary, group_order, outdir, config, sources=None):
    """Per-genus BGC density with genome, BGC and GCF count panels."""
    genera = top_genera(genome_totals, density, config.top_genera)
    height = max(4, 0.35 * len(genera) + 1.5)
    fig, axes = plt.subplots(1, 4, figsize=config.figsize(16, height), sharey=True,
                             gridspec_kw={'width_ratios': [3, 1, 1, 1]}, facecolor='white')

    draw_genus_density(axes[0], density, genera, group_order, config)
    if not genera:
        for ax in axes[1:]:
            ax.axis('off')
        return save_figure(fig, outdir, 'genus_bgc_density', config)

    y = np.arange(len(genera))

    # Genomes per genus, by source database when known
    if sources is not None and not sources.empty:
        table = sources.pivot_table(index='genus', columns='source', values='genome_count',
                                    aggfunc='sum', fill_value=0).reindex(genera, fill_value=0)
        source_colors = config.colors_for(list(table.columns))
        left = np.zeros(len(genera))
        for source in table.columns:
            axes[1].barh(y, table[source].values, left=left, color=source_colors[source],
                         edgecolor='white', label=source)
            left += table[source].values
        axes[1].legend(fontsize=8, loc='lower right')
    else:
        genomes = genome_totals.set_index('genus')['genome_count'].reindex(genera, fill_value=0)
        axes[1].barh(y, genomes.values, color='#7f8c8d', edgecolor='white')
    axes[1].set_xlabel('Genomes')

    indexed = summary.set_index('genus').reindex(genera, fill_value=0)
    axes[2].barh(y, indexed['bgc_count'].values, color='#2c5aa0', edgecolor='white')
    axes[2].set_xlabel('BGCs')
    axes[3].barh(y, indexed['gcf_count'].values, color='#4a8f70', edgecolor='white')
    axes[3].set_xlabel('GCFs')

    for ax in axes[1:]:
        ax.tick_params(axis='y', left=False)

    plt.tight_layout()
    return save_figure(fig, outdir, 'genus_bgc_density', config)


def plot_scaffold_hexbin(genome_counts, outdir, config):
    """Scaffold count vs BGCs per genome, faceted by contig-edge flag."""
    fig, axes = plt.subplots(1, 2, figsize=config.figsize(12, 5), sharey=True, facecolor='white')
    for ax, contig_edge in zip(axes, (False, True)):
        hb = draw_scaffold_hexbin(ax, genome_counts, contig_edge)
        if hb is not None:
            fig.colorbar(hb, ax=ax, label='Genomes')
    plt.tight_layout()
    return save_figure(fig, outdir, 'scaffold_bgc_hexbin', config)


def plot_filter_comparison(comparison, outdir, config):
    """BGCs retained and contig-edge share under each candidate quality filter."""
    fig, ax = plt.subplots(figsize=config.figsize(10, 6), facecolor='white')
    x = np.arange(len(comparison))
    ax.bar(x, comparison['bgcs'].values, color='#2c5aa0', edgecolor='white')
    ax.set_xticks(x)
    ax.set_xticklabels(comparison['filter'], rotation=45, ha='right')
    ax.set_ylabel('BGCs retained')

    ax2 = ax.twinx()
    ax2.plot(x, comparison['contig_edge_fraction'].values * 100, color='#d62728', marker='o')
    ax2.set_ylabel('BGCs on contig edge (%)', color='#d62728')
    ax2.set_ylim(0, 100)

    ax.set_title('Assembly quality filters')
    plt.tight_layout()
    return save_figure(fig, outdir, 'quality_filter_comparison', config)
