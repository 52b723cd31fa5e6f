"""Category consolidation for archivesort.

Collapses the free-text labels produced by the classifier ("Invoice",
"invoices", "Bill/Receipt", ...) into a small set of stable folder names.

Usage:
    from consolidation import consolidate_categories
    
    buckets = consolidate_categories({
        "Invoice_2024": ["a.pdf"],
        "receipt 2024": ["b.pdf"],
        "Vacation Photo": ["c.jpg"],
    })
    # {"Invoice_2024": ["a.pdf", "b.pdf"], "Images": ["c.jpg"]}
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from .labels import RawCategoryEntry, normalize_label, significant_words
from .synonyms import SYNONYM_GROUPS, IMAGES_BUCKET, IMAGE_TERMS
from .clustering import Cluster, cluster_entries, labels_match
from .naming import (
    ConsolidatedCategory,
    is_image_label,
    cluster_bucket,
    member_bucket,
    merge_clusters,
)

RawCategories = Union[Mapping[str, Sequence[str]], Iterable[Tuple[str, Sequence[str]]]]


@dataclass
class ConsolidationReport:
    """Full result of one consolidation pass.
    
    Attributes:
        entries: The raw entries, in input order
        clusters: The partition of entries (indices into `entries`)
        categories: Consolidated buckets, in first-seen order
    """
    entries: Tuple[RawCategoryEntry, ...]
    clusters: List[Cluster]
    categories: List[ConsolidatedCategory]
    
    def as_dict(self) -> Dict[str, List[str]]:
        """Return the {bucket: paths} mapping."""
        return {c.name: list(c.paths) for c in self.categories}
    
    def renames(self) -> List[Tuple[str, str]]:
        """Return (original label, bucket) for every label that changed."""
        result = []
        for cluster in self.clusters:
            for index in cluster.members:
                entry = self.entries[index]
                bucket = member_bucket(cluster, entry)
                if bucket != entry.label:
                    result.append((entry.label, bucket))
        return result


def build_entries(raw: RawCategories) -> Tuple[RawCategoryEntry, ...]:
    """Build immutable entries from a mapping or (label, paths) pairs."""
    items = raw.items() if isinstance(raw, Mapping) else raw
    return tuple(RawCategoryEntry(label=str(label), paths=tuple(paths))
                 for label, paths in items)


def consolidate(raw: RawCategories) -> ConsolidationReport:
    """Cluster raw labels, pick bucket names and merge file lists."""
    entries = build_entries(raw)
    clusters = cluster_entries(entries)
    return ConsolidationReport(
        entries=entries,
        clusters=clusters,
        categories=merge_clusters(entries, clusters),
    )


def consolidate_categories(raw: RawCategories) -> Dict[str, List[str]]:
    """Consolidate {label: paths} into {bucket: paths}."""
    return consolidate(raw).as_dict()


__all__ = [
    'RawCategoryEntry',
    'Cluster',
    'ConsolidatedCategory',
    'ConsolidationReport',
    'SYNONYM_GROUPS',
    'IMAGES_BUCKET',
    'IMAGE_TERMS',
    'normalize_label',
    'significant_words',
    'labels_match',
    'cluster_entries',
    'is_image_label',
    'cluster_bucket',
    'member_bucket',
    'merge_clusters',
    'build_entries',
    'consolidate',
    'consolidate_categories',
]
