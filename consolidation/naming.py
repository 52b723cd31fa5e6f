"""Bucket naming and file-list merging for finished clusters.

The image override lives here rather than in clustering: an image-like
label never decides what clusters together, only where files end up.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .clustering import Cluster
from .labels import RawCategoryEntry, normalize_label
from .synonyms import IMAGE_LABEL_RE, IMAGES_BUCKET


@dataclass(frozen=True)
class ConsolidatedCategory:
    """Final output unit: a bucket name and the files routed to it."""
    name: str
    paths: Tuple[str, ...]


def is_image_label(label: str) -> bool:
    """Check if a label names image content (photo, png, graphic, ...)."""
    return IMAGE_LABEL_RE.search(normalize_label(label)) is not None


def cluster_bucket(cluster: Cluster) -> str:
    """Default bucket for a cluster's members."""
    if is_image_label(cluster.primary_name):
        return IMAGES_BUCKET
    return cluster.primary_name


def member_bucket(cluster: Cluster, entry: RawCategoryEntry) -> str:
    """Bucket for one member; image-labeled members always go to Images."""
    if is_image_label(entry.label):
        return IMAGES_BUCKET
    return cluster_bucket(cluster)


def merge_clusters(
    entries: Sequence[RawCategoryEntry],
    clusters: Sequence[Cluster]
) -> List[ConsolidatedCategory]:
    """Route every member's paths to its bucket.
    
    Several clusters (or the image override) can target the same bucket, so
    paths are appended in cluster and member order. Nothing is deduplicated.
    
    Returns:
        One ConsolidatedCategory per bucket, in first-seen order
    """
    buckets: Dict[str, List[str]] = {}
    for cluster in clusters:
        for index in cluster.members:
            entry = entries[index]
            name = member_bucket(cluster, entry)
            buckets.setdefault(name, []).extend(entry.paths)
    
    return [ConsolidatedCategory(name=name, paths=tuple(paths))
            for name, paths in buckets.items()]
