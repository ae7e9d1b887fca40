"""
Feature Filtering

Decides which attributes of a product appear on its card.

Labels are stored HTML-escaped; matching always uses the plain
(unescaped, trimmed) label that users see and type.

With an explicit selection, only attributes whose label is in the
selection are kept. Without one, the exclusion list applies: an
attribute is dropped when any excluded term occurs in its label
(case-insensitive substring match). The substring rule can drop labels
that merely contain an excluded word; the explicit selection path is
exact.
"""

from typing import Iterable, List, Optional

from ..models import AttributeEntry, ProductRecord


def filter_attributes(
    attributes: Iterable[AttributeEntry],
    selection: Optional[Iterable[str]],
    excluded: Iterable[str],
) -> List[AttributeEntry]:
    """
    Filter attributes for one card.

    Args:
        attributes: Attributes of the product, in page order
        selection: Labels to keep, or None to use the exclusion list
        excluded: Exclusion terms used when selection is None

    Returns:
        Kept attributes, order preserved
    """
    if selection is not None:
        allowed = {label.strip() for label in selection}
        return [attr for attr in attributes if attr.plain_label in allowed]

    terms = [term.lower() for term in excluded if term]
    kept = []
    for attr in attributes:
        label = attr.plain_label.lower()
        if not any(term in label for term in terms):
            kept.append(attr)
    return kept


def available_features(records: Iterable[ProductRecord]) -> List[str]:
    """Return the distinct plain attribute labels across records, sorted."""
    labels = set()
    for record in records:
        labels.update(label for label in record.feature_labels() if label)
    return sorted(labels)
