"""Seed-then-absorb clustering of raw category labels.

Each unclaimed entry, in input order, seeds a cluster and absorbs every
later unclaimed entry that matches the seed. Entries are only compared with
the seed, never with other members or with earlier clusters, so chains of
similarity (A~B, B~C, A!~C) can end up split. That grouping is observable
output and is kept as is.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from .labels import RawCategoryEntry
from .synonyms import SYNONYM_GROUPS


@dataclass
class Cluster:
    """A group of entries that share one output name.
    
    Attributes:
        members: Indices into the entry sequence, seed first
        primary_name: Longest member label seen so far (first wins on ties)
    """
    members: List[int] = field(default_factory=list)
    primary_name: str = ""


def _exact_match(a: RawCategoryEntry, b: RawCategoryEntry) -> bool:
    return a.normalized == b.normalized


def _overlap_match(a: RawCategoryEntry, b: RawCategoryEntry) -> bool:
    shared = a.words & b.words
    if len(shared) >= 2:
        return True
    # One side's words are a non-empty subset of the other's
    return bool(shared) and (shared == a.words or shared == b.words)


def _synonym_match(a: RawCategoryEntry, b: RawCategoryEntry) -> bool:
    for group in SYNONYM_GROUPS:
        if not (a.words & group and b.words & group):
            continue
        if (a.words - group) & (b.words - group):
            return True
    return False


def labels_match(seed: RawCategoryEntry, other: RawCategoryEntry) -> bool:
    """Check whether `other` belongs in the cluster seeded by `seed`.
    
    Tests run in order and stop at the first hit: exact normalized match,
    significant-word overlap, then a synonym bridge.
    """
    return (
        _exact_match(seed, other)
        or _overlap_match(seed, other)
        or _synonym_match(seed, other)
    )


def cluster_entries(entries: Sequence[RawCategoryEntry]) -> List[Cluster]:
    """Partition entries into clusters.
    
    Every entry ends up in exactly one cluster. The result depends only on
    the entries and their order.
    
    Args:
        entries: Raw category entries in the order they were produced
        
    Returns:
        Clusters in seed order
    """
    grouped = [False] * len(entries)
    clusters: List[Cluster] = []
    
    for i, seed in enumerate(entries):
        if grouped[i]:
            continue
        grouped[i] = True
        cluster = Cluster(members=[i], primary_name=seed.label)
        
        for j in range(i + 1, len(entries)):
            if grouped[j]:
                continue
            other = entries[j]
            if not labels_match(seed, other):
                continue
            grouped[j] = True
            cluster.members.append(j)
            if len(other.label) > len(cluster.primary_name):
                cluster.primary_name = other.label
        
        clusters.append(cluster)
    
    return clusters
