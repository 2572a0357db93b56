#!/usr/bin/env python3
"""Table outputs for BGC summary statistics."""

from pathlib import Path


def write_table(df, outdir, name, config):
    """Write df as a TSV under outdir/tables, formatting floats per config."""
    tabledir = Path(outdir) / 'tables'
    tabledir.mkdir(parents=True, exist_ok=True)

    path = tabledir / f'{name}.tsv'
    df.to_csv(path, sep='\t', index=False, float_format=config.float_format)
    return path


def format_length_stats(stats):
    """Length statistics in kb with rounded values, for display."""
    display = stats.copy()
    for col in ('min', 'max', 'mean', 'median', 'sd'):
        display[col] = (display[col] / 1000).round(1)
    return display.rename(columns={col: f'{col}_kb' for col in ('min', 'max', 'mean', 'median', 'sd')})
