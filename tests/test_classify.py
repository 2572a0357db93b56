"""Tests for BGC classification, ranking and lumping."""

import itertools
import json

import pandas as pd
import pytest

from cyanobgc.analysis.classify import (
    UnmappedClassError, classify, classify_regions, combination_key, explode_categories,
    lump, lump_combinations, lumped_group_order, rank_combinations
)
from cyanobgc.utils.constants import LUMPED_LABEL

from conftest import make_regions


def test_classify_single_label(class_map):
    assert classify('terpene', class_map) == ('Terpene',)


def test_classify_list_is_sorted_and_distinct(class_map):
    assert classify('["T1PKS", "NRPS", "PKS"]', class_map) == ('NRP', 'Polyketide')


def test_classify_is_deterministic(class_map):
    raw = '["cyanobactin", "NRPS", "terpene"]'
    first = combination_key(classify(raw, class_map))
    second = combination_key(classify(raw, class_map))
    assert first == second == 'NRP, RiPP, Terpene'


def test_classify_is_order_insensitive(class_map):
    labels = ['NRPS', 'PKS', 'lanthipeptide']
    keys = {combination_key(classify(json.dumps(list(p)), class_map))
            for p in itertools.permutations(labels)}
    assert keys == {'NRP, Polyketide, RiPP'}


def test_classify_unmapped_class_fails(class_map):
    with pytest.raises(UnmappedClassError) as excinfo:
        classify('["NRPS", "mystery"]', class_map)
    assert excinfo.value.classes == ['mystery']
    assert 'mystery' in str(excinfo.value)


def test_combination_key_dedupes_and_sorts():
    assert combination_key(['Polyketide', 'NRP', 'Polyketide']) == 'NRP, Polyketide'


def test_classify_regions_adds_columns_without_mutating(class_map):
    regions = make_regions([
        ('G1', 'Nostoc', 1000, 1, False, '["PKS", "NRPS"]'),
        ('G1', 'Nostoc', 2000, 1, False, 'terpene'),
    ])
    before = regions.copy()

    classified = classify_regions(regions, class_map)

    assert list(classified['combination']) == ['NRP, Polyketide', 'Terpene']
    assert classified.loc[0, 'classes'] == ('PKS', 'NRPS')
    assert classified.loc[0, 'categories'] == ('NRP', 'Polyketide')
    assert list(regions.columns) == list(before.columns)


def test_classify_regions_reports_every_unmapped_class(class_map):
    regions = make_regions([
        ('G1', 'Nostoc', 1000, 1, False, 'foo'),
        ('G2', 'Nostoc', 1000, 1, False, '["bar", "NRPS"]'),
    ])
    with pytest.raises(UnmappedClassError) as excinfo:
        classify_regions(regions, class_map)
    assert excinfo.value.classes == ['bar', 'foo']


def test_rank_combinations_descending_with_alphabetical_ties(class_map):
    regions = classify_regions(make_regions([
        ('G1', 'Nostoc', 1, 1, False, 'terpene'),
        ('G1', 'Nostoc', 1, 1, False, 'NRPS'),
        ('G2', 'Nostoc', 1, 1, False, 'terpene'),
        ('G2', 'Nostoc', 1, 1, False, 'PKS'),
    ]), class_map)
    ranked = rank_combinations(regions)
    assert list(ranked.index) == ['Terpene', 'NRP', 'Polyketide']
    assert list(ranked) == [2, 1, 1]


def test_lump_keeps_frequent_combinations():
    assert lump('RiPP, Terpene', 80) == 'RiPP, Terpene'
    assert lump('RiPP, Terpene', 79) == LUMPED_LABEL


def test_nrp_polyketide_is_never_lumped():
    for count in (0, 1, 79, 80, 5000):
        assert lump('NRP, Polyketide', count) == 'NRP, Polyketide'


@pytest.mark.parametrize('combination, count', [
    ('Terpene', 500), ('Alkaloid, RiPP', 3), ('NRP, Polyketide', 1), (LUMPED_LABEL, 2),
])
def test_lump_is_idempotent(combination, count):
    once = lump(combination, count)
    assert lump(once, count) == once


def test_lump_custom_threshold():
    assert lump('Terpene', 5, threshold=5) == 'Terpene'
    assert lump('Terpene', 4, threshold=5) == LUMPED_LABEL


def test_lump_combinations_and_group_order():
    counts = pd.Series({'Terpene': 120, 'RiPP': 90, 'NRP, Polyketide': 4,
                       'Alkaloid': 3, 'Other, RiPP': 2}, name='count')
    lumped = lump_combinations(counts)
    assert lumped == {
        'Terpene': 'Terpene',
        'RiPP': 'RiPP',
        'NRP, Polyketide': 'NRP, Polyketide',
        'Alkaloid': LUMPED_LABEL,
        'Other, RiPP': LUMPED_LABEL,
    }
    assert lumped_group_order(counts, lumped) == ['Terpene', 'RiPP', 'NRP, Polyketide', LUMPED_LABEL]


def test_explode_categories_marks_hybrids(class_map):
    regions = classify_regions(make_regions([
        ('G1', 'Nostoc', 1, 1, False, '["NRPS", "PKS"]'),
        ('G1', 'Nostoc', 1, 1, False, 'terpene'),
    ]), class_map)
    exploded = explode_categories(regions)
    assert sorted(exploded['category']) == ['NRP', 'Polyketide', 'Terpene']
    assert exploded.groupby('category')['is_hybrid'].first().to_dict() == {
        'NRP': True, 'Polyketide': True, 'Terpene': False,
    }
