"""Measures that compare two community assignments of the same vertices."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

_RULE = "*******************************************"
_THIN = "-------------------------------------------"


@dataclass(frozen=True)
class ComparisonResult:
    """Pair-counting statistics of an output clustering against the truth."""

    num_vertices_truth: int
    num_communities_truth: int
    num_vertices_output: int
    num_communities_output: int
    same_same: int
    same_diff: int
    diff_same: int
    precision: float
    recall: float
    f_score: float
    gini_truth: float
    gini_output: float

    def report(self) -> str:
        """Return the statistics as a human-readable block of text."""
        lines = [
            _RULE,
            "Cluster comparison statistics: ",
            _RULE,
            f"|C1| (truth)          : {self.num_vertices_truth}",
            f"Num communities in C1 : {self.num_communities_truth}",
            f"|C2| (output)         : {self.num_vertices_output}",
            f"Num communities in C2 : {self.num_communities_output}",
            _THIN,
            f"Same-Same (True positive)  : {self.same_same}",
            f"Same-Diff (False negative) : {self.same_diff}",
            f"Diff-Same (False positive) : {self.diff_same}",
            _THIN,
            f"Precision             :  {self.precision:f} "
            f"({self.precision * 100:3.2f}%)",
            f"Recall                :  {self.recall:f} "
            f"({self.recall * 100:3.2f}%)",
            f"F-score               :  {self.f_score:f}",
            _THIN,
            f"Gini coefficient, C1  :  {self.gini_truth:f} ",
            f"Gini coefficient, C2  :  {self.gini_output:f} ",
            _RULE,
        ]
        return "\n".join(lines) + "\n"


def _normalise(labels: Sequence[int]) -> tuple[list[int], list[int]]:
    """Map community ids to contiguous slots and return slots and sizes.

    Ids run from zero when zero occurs, from one otherwise; every id up to
    the largest gets a slot, even if empty. All unassigned (negative)
    vertices share one extra slot at the end.
    """
    if not labels:
        raise ValueError("community assignment is empty")
    largest = max(labels)
    has_zero = 0 in labels
    has_negative = any(label < 0 for label in labels)
    assigned = max(largest, -1) + int(has_zero)
    if assigned <= 0:
        raise ValueError("no vertex is assigned to a community")
    offset = 0 if has_zero else 1
    slots = [assigned if label < 0 else label - offset for label in labels]
    sizes = [0] * (assigned + int(has_negative))
    for slot in slots:
        sizes[slot] += 1
    return slots, sizes


def _pair_split(groups: Sequence[int], other: Sequence[int]) -> tuple[int, int]:
    """Count pairs sharing a group in ``groups`` that agree / disagree in ``other``."""
    members: dict[int, Counter[int]] = {}
    for group, label in zip(groups, other):
        members.setdefault(group, Counter())[label] += 1
    agree = total = 0
    for counts in members.values():
        size = sum(counts.values())
        total += size * (size - 1) // 2
        agree += sum(k * (k - 1) // 2 for k in counts.values())
    return agree, total - agree


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else math.nan


def compare_communities(
    truth: Sequence[int], output: Sequence[int]
) -> ComparisonResult:
    """Compare ``output`` with the ground truth ``truth`` by counting vertex pairs.

    A pair in one truth community is a true positive when the output also
    puts it together, a false negative otherwise; a pair together only in
    the output is a false positive. Unassigned (negative) vertices count as
    one community. Undefined ratios come out as NaN.
    """
    if len(truth) != len(output):
        raise ValueError("both assignments must cover the same vertices")
    truth_slots, truth_sizes = _normalise(truth)
    output_slots, output_sizes = _normalise(output)

    same_same, same_diff = _pair_split(truth_slots, output_slots)
    _, diff_same = _pair_split(output_slots, truth_slots)

    precision = _ratio(same_same, same_same + diff_same)
    recall = _ratio(same_same, same_same + same_diff)
    f_score = 2 * _ratio(precision * recall, precision + recall)

    return ComparisonResult(
        num_vertices_truth=len(truth),
        num_communities_truth=len(truth_sizes),
        num_vertices_output=len(output),
        num_communities_output=len(output_sizes),
        same_same=same_same,
        same_diff=same_diff,
        diff_same=diff_same,
        precision=precision,
        recall=recall,
        f_score=f_score,
        gini_truth=gini_coefficient(truth_sizes),
        gini_output=gini_coefficient(output_sizes),
    )


def gini_coefficient(sizes: Sequence[int]) -> float:
    """Return the Gini coefficient of a distribution of sizes.

    Zero means all sizes are equal; values towards one mean the total is
    concentrated in few entries. The input is not modified.
    """
    ordered = sorted(sizes)
    count = len(ordered)
    if count == 0:
        raise ValueError("no sizes given")
    total = sum(ordered)
    if total == 0:
        raise ValueError("sizes sum to zero")
    weighted = sum(rank * size for rank, size in enumerate(ordered, start=1))
    return (2 * weighted) / (count * total) - (count + 1) / count


def merkin_metric(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the Mirkin distance term of ``second`` with respect to ``first``.

    Counts the pairs placed together by ``first`` but apart by ``second``,
    doubled and divided by the product of the two lengths. Community ids in
    ``first`` must be non-negative, with a largest id above zero.
    """
    if not first or not second:
        raise ValueError("community assignments must not be empty")
    if len(second) < len(first):
        raise ValueError("second assignment must cover every vertex of the first")
    if min(first) < 0:
        raise ValueError("community ids must be non-negative")
    if max(first) <= 0:
        raise ValueError("at least two community ids are required")
    _, disagree = _pair_split(first, second[: len(first)])
    return (2 * disagree) / (len(first) * len(second))