"""Hypothesis property tests for the stateless helpers and memoization.

Properties exercised:

- **Shuffle is a permutation**: same multiset, same length, input untouched.
- **Pick/omit partition**: for any mapping and key set, ``pick`` and ``omit``
  are disjoint and together rebuild the mapping.
- **Memoization calls once per distinct key**: for any call sequence, the
  wrapped function runs exactly once per distinct first argument.
"""

from __future__ import annotations

import random
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dashkit.toolkit.helpers import omit, pick, shuffle
from dashkit.toolkit.memoize import memoize

pytestmark = [pytest.mark.property]

keys = st.text(min_size=1, max_size=4)
mappings = st.dictionaries(keys, st.integers(), max_size=12)


@given(items=st.lists(st.integers()), seed=st.integers())
def test_shuffle_is_a_permutation(items: list[int], seed: int) -> None:
    """Output holds exactly the input multiset; the input is untouched."""
    original = list(items)
    result = shuffle(items, random.Random(seed))
    assert Counter(result) == Counter(original)
    assert items == original


@given(obj=mappings, selected=st.sets(keys, max_size=6))
def test_pick_and_omit_partition_the_mapping(obj: dict[str, int], selected: set[str]) -> None:
    """pick and omit are disjoint and their union is the original mapping."""
    picked = pick(obj, selected)
    omitted = omit(obj, selected)
    assert picked.keys().isdisjoint(omitted.keys())
    assert {**picked, **omitted} == obj
    assert set(picked) == set(obj) & selected


@given(calls=st.lists(st.integers(min_value=-5, max_value=5), max_size=40))
def test_memoize_runs_once_per_distinct_key(calls: list[int]) -> None:
    """The wrapped function runs once for each distinct argument, in first-seen order."""
    seen: list[int] = []

    def square(n: int) -> int:
        seen.append(n)
        return n * n

    wrapped = memoize(square)
    results = [wrapped(n) for n in calls]

    assert results == [n * n for n in calls]
    assert seen == list(dict.fromkeys(calls))
