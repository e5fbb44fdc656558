"""Tests for ordering and sorting tours by cost."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest
from tsp_chromosome import CitySet, Tour, best_tour, compare_tours, costs, sort_by_cost


def _tour_with_cost(cost):
    """Two cities cost/2 apart give a tour of exactly `cost`."""
    cities = CitySet([(0.0, 0.0), (cost / 2, 0.0)])
    return Tour.from_order(cities, [0, 1])


def test_sort_by_cost_ascending():
    """Tours come out cheapest first."""
    tours = [_tour_with_cost(c) for c in (5.0, 1.0, 3.0)]
    sort_by_cost(tours, 3)
    assert costs(tours) == [1.0, 3.0, 5.0]


def test_sort_sorted_is_noop():
    """An already sorted list keeps its objects in place."""
    tours = [_tour_with_cost(c) for c in (1.0, 3.0, 5.0)]
    before = list(tours)
    sort_by_cost(tours)
    assert all(a is b for a, b in zip(tours, before))


def test_sort_is_idempotent():
    """Sorting twice equals sorting once."""
    tours = [_tour_with_cost(c) for c in (4.0, 2.0, 8.0, 6.0, 2.0)]
    sort_by_cost(tours)
    once = list(tours)
    sort_by_cost(tours)
    assert all(a is b for a, b in zip(tours, once))


def test_sort_is_stable():
    """Equal-cost tours keep their relative order."""
    first, second = _tour_with_cost(2.0), _tour_with_cost(2.0)
    tours = [_tour_with_cost(3.0), first, second]
    sort_by_cost(tours)
    assert tours[1] is first
    assert tours[2] is second


def test_sort_only_leading_entries():
    """Entries past count are left alone."""
    tours = [_tour_with_cost(c) for c in (5.0, 1.0, 3.0, 0.5)]
    sort_by_cost(tours, 2)
    assert costs(tours) == [1.0, 5.0, 3.0, 0.5]


def test_sort_small_counts():
    """Zero or one entries need no work."""
    tours = [_tour_with_cost(c) for c in (5.0, 1.0)]
    sort_by_cost(tours, 0)
    sort_by_cost(tours, 1)
    assert costs(tours) == [5.0, 1.0]
    empty = []
    sort_by_cost(empty)
    assert empty == []


def test_sort_count_out_of_bounds():
    """Counts outside [0, len(tours)] are an error."""
    with pytest.raises(IndexError):
        sort_by_cost([_tour_with_cost(1.0)], 2)
    with pytest.raises(IndexError):
        sort_by_cost([], -5)


def test_compare_tours():
    """Comparison follows cost."""
    a, b = _tour_with_cost(1.0), _tour_with_cost(2.0)
    assert compare_tours(a, b) == -1
    assert compare_tours(b, a) == 1
    assert compare_tours(a, _tour_with_cost(1.0)) == 0


def test_best_tour():
    """The cheapest tour wins; the first one on ties."""
    first = _tour_with_cost(1.0)
    tours = [_tour_with_cost(4.0), first, _tour_with_cost(1.0)]
    assert best_tour(tours) is first
    with pytest.raises(ValueError):
        best_tour([])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
