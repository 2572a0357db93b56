#!/usr/bin/env python3
"""
Cyanobacteriota BGC statistics

Loads genome taxonomy, antiSMASH region calls, NCBI assembly levels and
BiG-SLiCE GCF assignments, keeps regions from Complete/Chromosome assemblies,
and writes summary tables and figures:
- BGC length statistics per category combination
- Category and lumped-combination bar charts
- Per-genus BGC density with genome, BGC and GCF panels
- Scaffold count vs BGC count hexbins, faceted by contig edge
- Composite multi-panel figure
"""

import argparse
import sys
from pathlib import Path

from .analysis.aggregate import (
    gcf_counts_per_genus, genome_bgc_counts, genus_combination_counts, genus_density,
    genus_genome_totals, genus_summary, length_stats_by_combination
)
from .analysis.classify import (
    UnmappedClassError, classify_regions, explode_categories, lump_combinations,
    lumped_group_order, rank_combinations
)
from .analysis.quality import (
    compare_quality_filters, filter_high_quality, qualifying_assemblies
)
from .clustering.bigslice_gcfs import load_gcf_assignments
from .taxonomy.load_tables import (
    attach_assembly_quality, load_assembly_quality, load_class_categories,
    load_genome_sources, load_regions, load_taxonomy, load_zero_hit_accessions,
    zero_hit_genomes
)
from .utils.constants import LUMP_THRESHOLD
from .viz import (
    RenderConfig, format_length_stats, plot_category_bars, plot_composite_figure,
    plot_filter_comparison, plot_genus_density, plot_length_histogram, plot_lumped_bars,
    plot_scaffold_hexbin, write_table
)


def run_pipeline(regions_file, taxonomy_file, assembly_quality_file, zero_hits_file, outdir,
                 class_map_file=None, genome_sources_file=None, bigslice_file=None,
                 config=None, lump_threshold=LUMP_THRESHOLD, quality_filter=True,
                 compare_filters=False):
    """Run every stage and write tables and figures under outdir.

    Returns a dict of the derived tables keyed by name.
    """
    config = config or RenderConfig()
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # Loader
    print("Loading input tables...")
    class_categories = load_class_categories(class_map_file)
    taxonomy = load_taxonomy(taxonomy_file)
    quality = load_assembly_quality(assembly_quality_file)
    regions = load_regions(regions_file, taxonomy)
    regions = attach_assembly_quality(regions, quality)
    zero_hits = zero_hit_genomes(load_zero_hit_accessions(zero_hits_file), taxonomy)
    sources = load_genome_sources(genome_sources_file) if genome_sources_file else None
    gcf_assignments = load_gcf_assignments(bigslice_file, taxonomy) if bigslice_file else None

    # Classifier / reshaper
    print("Classifying BGC regions...")
    regions = classify_regions(regions, class_categories)

    # Filter
    qualifying = qualifying_assemblies(quality)
    tables = {}
    if compare_filters:
        print("Comparing assembly quality filters...")
        tables['quality_filter_comparison'] = compare_quality_filters(regions, qualifying)

    if quality_filter:
        print(f"Filtering to {len(qualifying)} Complete/Chromosome assemblies...")
        filtered = filter_high_quality(regions, qualifying)
        zero_hits = filter_high_quality(zero_hits, qualifying, key='accession')
        print(f"Kept {len(filtered)} of {len(regions)} BGC regions "
              f"from {filtered['genome_id'].nunique()} genomes")
    else:
        print("Skipping assembly quality filter")
        filtered = regions

    if filtered.empty:
        print("Warning: no BGC regions left after filtering; figures will be empty")

    # Aggregator
    print("Aggregating statistics...")
    ranked = rank_combinations(filtered)
    lumped = lump_combinations(ranked, lump_threshold)
    group_order = lumped_group_order(ranked, lumped)

    tables['length_stats_by_combination'] = length_stats_by_combination(filtered)
    tables['genus_combination_counts'] = genus_combination_counts(filtered, lumped)
    tables['genus_genome_totals'] = genus_genome_totals(filtered, zero_hits)
    tables['genus_density'] = genus_density(tables['genus_combination_counts'],
                                            tables['genus_genome_totals'])
    gcf_counts = gcf_counts_per_genus(gcf_assignments) if gcf_assignments is not None else None
    if gcf_counts is not None:
        tables['gcf_counts_per_genus'] = gcf_counts
    tables['genus_summary'] = genus_summary(filtered, tables['genus_genome_totals'], gcf_counts)
    tables['genome_bgc_counts'] = genome_bgc_counts(filtered)

    for name, table in tables.items():
        write_table(table, outdir, name, config)
    print(f"Wrote {len(tables)} tables to {outdir / 'tables'}")

    # Renderer
    print("Generating figures...")
    written = []
    written += plot_length_histogram(filtered, lumped, outdir, config)
    written += plot_category_bars(explode_categories(filtered), outdir, config)
    written += plot_lumped_bars(ranked, lumped, outdir, config)
    written += plot_genus_density(tables['genus_density'], tables['genus_genome_totals'],
                                  tables['genus_summary'], group_order, outdir, config,
                                  sources=sources)
    written += plot_scaffold_hexbin(tables['genome_bgc_counts'], outdir, config)
    if compare_filters:
        written += plot_filter_comparison(tables['quality_filter_comparison'], outdir, config)

    print("Generating composite figure...")
    written += plot_composite_figure(filtered, ranked, lumped, group_order,
                                     tables['genus_density'], tables['genus_genome_totals'],
                                     tables['genome_bgc_counts'], outdir, config)
    print(f"Wrote {len(written)} figure files to {outdir / 'figures'}")

    top = format_length_stats(tables['length_stats_by_combination']).head(10)
    if not top.empty:
        print("Top category combinations:")
        print(top.to_string(index=False))

    return tables


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Compute and plot BGC statistics across Cyanobacteriota genomes')
    parser.add_argument('--regions', type=Path, required=True, help='Per-genome BGC region table (TSV)')
    parser.add_argument('--taxonomy', type=Path, required=True, help='Genome taxonomy table (TSV)')
    parser.add_argument('--assembly_quality', type=Path, required=True, help='Assembly level table (TSV)')
    parser.add_argument('--zero_hits', type=Path, required=True, help='Accessions with no detected BGCs, one per line')
    parser.add_argument('--class_map', type=Path, help='BGC class -> category table (TSV); built-in antiSMASH map if omitted')
    parser.add_argument('--genome_sources', type=Path, help='Per-genus genome counts by source (TSV)')
    parser.add_argument('--bigslice', type=Path, help='BiG-SLiCE GCF assignments (TSV) or data.db')
    parser.add_argument('--outdir', type=Path, required=True, help='Output directory for tables and figures')
    parser.add_argument('--lump_threshold', type=int, default=LUMP_THRESHOLD,
                        help='Combinations with fewer BGCs are lumped into "All other hybrids"')
    parser.add_argument('--dpi', type=int, default=300, help='Raster figure resolution')
    parser.add_argument('--formats', nargs='+', default=['png', 'pdf'], help='Figure formats to write')
    parser.add_argument('--top_genera', type=int, default=25, help='Genera shown in genus panels')
    parser.add_argument('--compare_filters', action='store_true',
                        help='Also tabulate and plot scaffold-count quality filters')
    parser.add_argument('--no_quality_filter', action='store_true',
                        help='Keep regions from all assembly levels')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    config = RenderConfig(dpi=args.dpi, formats=tuple(args.formats), top_genera=args.top_genera)
    try:
        run_pipeline(
            regions_file=args.regions,
            taxonomy_file=args.taxonomy,
            assembly_quality_file=args.assembly_quality,
            zero_hits_file=args.zero_hits,
            outdir=args.outdir,
            class_map_file=args.class_map,
            genome_sources_file=args.genome_sources,
            bigslice_file=args.bigslice,
            config=config,
            lump_threshold=args.lump_threshold,
            quality_filter=not args.no_quality_filter,
            compare_filters=args.compare_filters,
        )
    except (UnmappedClassError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Analysis complete! Results in {args.outdir}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
