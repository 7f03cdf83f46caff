"""Tests for value-space clustering."""

import math

import numpy as np
import pytest

from idwmap import Cluster, ConfigurationError, Range, make_data_items
from idwmap.clustering import (
    CENTROID_ALGORITHMS,
    centroids_by_value,
    empty_clusters_by_count,
    kmeans_centroids,
    clusters_from_centroids,
    cluster_values,
    assign_items,
    get_data_clusters,
    find_cluster_index,
    cluster_summary
)
from idwmap.data_processing import get_data_range


def _items(values):
    return make_data_items([[i, 0] for i in range(len(values))], values)


def test_by_count_splits_at_midpoint_of_straddling_values():
    data = _items([6, 2, 4, 1, 5, 3])

    clusters = get_data_clusters(data, get_data_range(data), 2, 'byCount')

    assert [(c.min, c.max) for c in clusters] == [(1, 3.5), (3.5, 6)]
    assert [sorted(i.value for i in c.items) for c in clusters] == [[1, 2, 3], [4, 5, 6]]


def test_by_count_groups_have_similar_sizes(rng):
    values = rng.normal(50, 15, size=1000)

    clusters = empty_clusters_by_count(values, 7)
    filled = assign_items(clusters, _items(values))

    sizes = [len(c.items) for c in filled]
    assert sum(sizes) == 1000
    assert max(sizes) - min(sizes) <= 2


def test_by_count_with_fewer_values_than_clusters():
    clusters = empty_clusters_by_count([3, 8], 4)

    assert len(clusters) == 4
    assert clusters[0].min == 3 and clusters[-1].max == 8
    assert all(a.max == b.min for a, b in zip(clusters, clusters[1:]))


def test_by_values_centroids_are_equally_spaced():
    centroids = centroids_by_value([0, 37, 100], 10)

    np.testing.assert_array_equal(centroids, np.arange(5, 100, 10))


def test_by_values_clusters_have_equal_width():
    clusters = cluster_values([0, 37, 100], Range(0, 100), 10, 'byValues')

    assert [c.min for c in clusters] == list(range(0, 100, 10))
    assert [c.max for c in clusters] == list(range(10, 101, 10))


def test_by_values_outer_bounds_clamp_to_supplied_range():
    clusters = cluster_values([10, 20, 30, 40], Range(0, 50), 3, 'byValues')

    assert clusters[0].min == 0
    assert clusters[-1].max == 50


def test_out_of_range_centroids_are_dropped():
    clusters = clusters_from_centroids([-5, 20, 10, 40, 75], Range(0, 50))

    assert [(c.min, c.max) for c in clusters] == [(0, 15.0), (15.0, 30.0), (30.0, 50)]


def test_kmeans_moves_seeds_to_cluster_means():
    values = [1, 2, 3, 50, 51, 52, 98, 99, 100]

    centroids = np.sort(kmeans_centroids(values, 3, init=[0, 40, 120]))

    np.testing.assert_allclose(centroids, [2, 51, 99])


def test_kmeans_with_few_distinct_values():
    centroids = kmeans_centroids([4, 4, 9], 5)

    np.testing.assert_array_equal(np.sort(centroids), [4, 9])
    clusters = cluster_values([4, 4, 9], Range(4, 9), 5, 'kMeansByCount')
    assert len(clusters) == 2


@pytest.mark.parametrize("algorithm", ['kMeansByCount', 'kMeansByValues'])
def test_seeded_kmeans_finds_separated_groups(algorithm):
    values = [1, 2, 3, 50, 51, 52, 98, 99, 100]
    data = _items(values)

    clusters = get_data_clusters(data, get_data_range(data), 3, algorithm)

    assert [sorted(i.value for i in c.items) for c in clusters] == [
        [1, 2, 3], [50, 51, 52], [98, 99, 100]
    ]


@pytest.mark.parametrize("algorithm", ['kmrand', 'kmpp'])
def test_random_seeding_is_reproducible(algorithm, rng):
    values = rng.integers(0, 1000, size=300)

    first = cluster_values(values, Range(0, 999), 6, algorithm, random_state=7)
    second = cluster_values(values, Range(0, 999), 6, algorithm, random_state=7)

    assert [(c.min, c.max) for c in first] == [(c.min, c.max) for c in second]


@pytest.mark.parametrize("algorithm", CENTROID_ALGORITHMS)
def test_clusters_partition_the_value_range(algorithm, rng):
    values = rng.integers(0, 101, size=200)
    data = _items(values)
    value_range = get_data_range(data)

    clusters = get_data_clusters(data, value_range, 5, algorithm, random_state=0)

    assert 1 <= len(clusters) <= 5
    assert clusters[0].min == value_range.min
    assert clusters[-1].max == value_range.max
    for a, b in zip(clusters, clusters[1:]):
        assert a.min <= b.min
        assert a.max == b.min
    assert sum(len(c.items) for c in clusters) == len(data)


@pytest.mark.parametrize("algorithm", CENTROID_ALGORITHMS)
def test_empty_values_give_no_clusters(algorithm):
    assert cluster_values([], Range.empty(), 4, algorithm) == []
    assert get_data_clusters([], Range.empty(), 4, algorithm) == []


def test_cluster_count_never_exceeds_request():
    values = list(range(10))
    # centroids from the supplied range only partially overlap the data
    clusters = cluster_values(values, Range(0, 4), 5, 'byValues')

    assert len(clusters) < 5
    assert clusters[-1].max == 4


@pytest.mark.parametrize("count", [0, -2, 2.5])
def test_invalid_count_is_rejected(count):
    with pytest.raises(ConfigurationError):
        cluster_values([1, 2, 3], Range(1, 3), count, 'byCount')


def test_unknown_algorithm_is_rejected():
    with pytest.raises(ConfigurationError):
        cluster_values([1, 2, 3], Range(1, 3), 2, 'jenks')


def test_last_cluster_is_closed():
    clusters = [Cluster(0, 5), Cluster(5, 10)]
    data = _items([0, 5, 10, 10.5, -1])

    filled = assign_items(clusters, data)

    assert [i.value for i in filled[0].items] == [0]
    assert [i.value for i in filled[1].items] == [5, 10]
    assert clusters[0].items == []


def test_values_above_narrow_range_stay_unassigned():
    data = _items(list(range(10)))

    clusters = get_data_clusters(data, Range(0, 4), 5, 'byValues')

    assert clusters[-1].max == 4
    assigned = sorted(i.value for c in clusters for i in c.items)
    assert assigned == [0, 1, 2, 3, 4]
    assert all(c.min <= i.value <= c.max for c in clusters for i in c.items)


def test_find_cluster_index():
    clusters = [Cluster(0, 5), Cluster(5, 10), Cluster(10, 20)]

    assert find_cluster_index(-4, clusters) == 0
    assert find_cluster_index(4.99, clusters) == 0
    assert find_cluster_index(5, clusters) == 1
    assert find_cluster_index(20, clusters) == 2
    assert find_cluster_index(250, clusters) == 2
    assert find_cluster_index(math.nan, clusters) is None
    assert find_cluster_index(3, []) is None


def test_cluster_summary():
    data = _items([1, 2, 3, 4, 5, 6])
    clusters = get_data_clusters(data, get_data_range(data), 2, 'byCount')

    summary = cluster_summary(clusters)

    assert list(summary.columns) == ['min', 'max', 'midpoint', 'count']
    assert summary['count'].tolist() == [3, 3]
    assert summary['midpoint'].tolist() == [2.25, 4.75]
