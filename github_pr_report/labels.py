"""Classification of pull requests into configured label groups."""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Tuple

from .items import Item


@dataclass(frozen=True)
class LabelGroup:
    name: str
    repos: FrozenSet[str] = frozenset()
    items: Tuple[Item, ...] = field(default_factory=tuple)


def exclude_items(items, exclude):
    """Drop items whose repository is in the exclusion set."""
    exclude = set(exclude)
    return [item for item in items if item.repository_name not in exclude]


def sort_items(items):
    """Stable sort by repository name."""
    return sorted(items, key=lambda item: item.repository_name)


def find_label(item, labels):
    """Return the index of the first label whose repos contain the item, or None."""
    for index, label in enumerate(labels):
        if item.repository_name in label.repos:
            return index
    return None


def match_items_with_labels(items, labels):
    """Partition items between label groups and an unknown bucket.

    Each item goes to the first label (in the given order) listing its
    repository. Items keep their relative order within a group. The input
    labels are left untouched; new groups are returned.

    Args:
        items (list): Items to classify
        labels (list): LabelGroup definitions

    Returns:
        tuple: (list of populated LabelGroup, list of unmatched Item)
    """
    buckets = [list(label.items) for label in labels]
    unknown = []

    for item in items:
        index = find_label(item, labels)
        if index is None:
            unknown.append(item)
        else:
            buckets[index].append(item)

    groups = [replace(label, items=tuple(bucket)) for label, bucket in zip(labels, buckets)]
    return groups, unknown
