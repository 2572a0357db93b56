"""End-to-end tests for the analysis CLI."""

import pandas as pd

from cyanobgc.run_analysis import main, run_pipeline
from cyanobgc.viz import RenderConfig


def _args(inputs, outdir, *extra):
    return [
        '--regions', str(inputs / 'regions.tsv'),
        '--taxonomy', str(inputs / 'taxonomy.tsv'),
        '--assembly_quality', str(inputs / 'assembly_quality.tsv'),
        '--zero_hits', str(inputs / 'zero_hits.txt'),
        '--class_map', str(inputs / 'class_map.tsv'),
        '--outdir', str(outdir),
        '--dpi', '40',
        *extra,
    ]


def test_quality_filter_keeps_only_complete_genome(two_genome_inputs):
    tables = run_pipeline(
        regions_file=two_genome_inputs / 'regions.tsv',
        taxonomy_file=two_genome_inputs / 'taxonomy.tsv',
        assembly_quality_file=two_genome_inputs / 'assembly_quality.tsv',
        zero_hits_file=two_genome_inputs / 'zero_hits.txt',
        outdir=two_genome_inputs / 'out',
        class_map_file=two_genome_inputs / 'class_map.tsv',
        config=RenderConfig(dpi=40, formats=('png',)),
    )

    stats = tables['length_stats_by_combination'].set_index('combination')
    assert stats['count'].to_dict() == {'NRP': 1, 'NRP, Polyketide': 1, 'Polyketide': 1}
    assert stats.loc['NRP, Polyketide', 'max'] == 60000

    totals = tables['genus_genome_totals'].set_index('genus')
    assert totals.loc['Nostoc', 'genomes_with_bgcs'] == 1
    assert totals.loc['Nostoc', 'zero_hit_genomes'] == 1
    assert totals.loc['Nostoc', 'genome_count'] == 2
    assert 'Planktothrix' not in totals.index

    density = tables['genus_density'].set_index('lumped_group')
    assert density.loc['NRP, Polyketide', 'density'] == 0.5
    assert density.loc['All other hybrids', 'density'] == 1.0

    genomes = tables['genome_bgc_counts'].drop_duplicates('genome_id').set_index('genome_id')
    assert genomes['assembly_level'].to_dict() == {'GCF_A': 'Complete'}


def test_cli_writes_tables_and_figures(two_genome_inputs):
    outdir = two_genome_inputs / 'results'
    status = main(_args(two_genome_inputs, outdir,
                        '--genome_sources', str(two_genome_inputs / 'genome_sources.tsv'),
                        '--bigslice', str(two_genome_inputs / 'bigslice.tsv'),
                        '--compare_filters'))
    assert status == 0

    for name in ('length_stats_by_combination', 'genus_combination_counts', 'genus_density',
                 'genus_summary', 'gcf_counts_per_genus', 'quality_filter_comparison'):
        assert (outdir / 'tables' / f'{name}.tsv').exists()

    for name in ('bgc_length_histogram', 'bgc_category_bars', 'bgc_lumped_combinations',
                 'genus_bgc_density', 'scaffold_bgc_hexbin', 'quality_filter_comparison',
                 'composite_figure'):
        for fmt in ('png', 'pdf'):
            assert (outdir / 'figures' / f'{name}.{fmt}').exists()

    summary = pd.read_csv(outdir / 'tables' / 'genus_summary.tsv', sep='\t').set_index('genus')
    assert summary.loc['Nostoc', 'gcf_count'] == 2
    assert summary.loc['Nostoc', 'bgc_count'] == 3


def test_cli_without_quality_filter_keeps_all_regions(two_genome_inputs):
    outdir = two_genome_inputs / 'all'
    assert main(_args(two_genome_inputs, outdir, '--no_quality_filter', '--formats', 'png')) == 0
    stats = pd.read_csv(outdir / 'tables' / 'length_stats_by_combination.tsv', sep='\t')
    assert stats['count'].sum() == 8
    assert stats.set_index('combination').loc['NRP, Polyketide', 'count'] == 2


def test_cli_fails_on_unmapped_class(two_genome_inputs, capsys):
    class_map = two_genome_inputs / 'class_map.tsv'
    lines = [line for line in class_map.read_text().splitlines() if not line.startswith('indole')]
    class_map.write_text('\n'.join(lines) + '\n')

    status = main(_args(two_genome_inputs, two_genome_inputs / 'broken', '--formats', 'png'))

    assert status == 1
    assert 'indole' in capsys.readouterr().out


def test_cli_fails_on_empty_class_field(two_genome_inputs, capsys):
    regions = two_genome_inputs / 'regions.tsv'
    regions.write_text(regions.read_text().replace('\tterpene\n', '\t\n'))

    status = main(_args(two_genome_inputs, two_genome_inputs / 'broken', '--formats', 'png'))

    assert status == 1
    assert 'Empty BGC class field' in capsys.readouterr().out
