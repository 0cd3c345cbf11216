"""Group records into category boxes: catalog categories, Custom and Uncategorized."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lifelab.models.analytics import DISTANT_PAST, BoxKind, CategoryBox

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lifelab.models.catalog import CategoryCatalog
    from lifelab.models.experiment import ExperimentRecord

CUSTOM_KEY = "custom"
CUSTOM_TITLE = "Custom"
UNCATEGORIZED_KEY = "uncategorized"
UNCATEGORIZED_TITLE = "Uncategorized"


def _make_box(
    key: str,
    title: str,
    kind: BoxKind,
    records: list[ExperimentRecord],
    custom_names: list[str] | None = None,
) -> CategoryBox:
    updated_at = max((r.updated_at for r in records), default=DISTANT_PAST)
    return CategoryBox(
        key=key,
        title=title,
        kind=kind,
        records=records,
        updated_at=updated_at,
        custom_category_names=custom_names or [],
    )


def sort_boxes(boxes: Sequence[CategoryBox]) -> list[CategoryBox]:
    """Populated boxes by recency, then empty boxes alphabetically."""
    populated = sorted(
        (b for b in boxes if not b.is_empty), key=lambda b: b.updated_at, reverse=True
    )
    empty = sorted((b for b in boxes if b.is_empty), key=lambda b: b.title.casefold())
    return populated + empty


def group_by_category(
    records: Sequence[ExperimentRecord],
    catalog: CategoryCatalog | None = None,
) -> list[CategoryBox]:
    """Partition *records* so each one lands in exactly one box.

    Without a catalog only the Custom and Uncategorized boxes exist.
    """
    categories = catalog.categories if catalog is not None else []
    known = {c.title.strip() for c in categories}

    by_title: dict[str, list[ExperimentRecord]] = {title: [] for title in known}
    custom: list[ExperimentRecord] = []
    uncategorized: list[ExperimentRecord] = []

    for record in records:
        category = record.trimmed_category
        if not category:
            uncategorized.append(record)
        elif category in known:
            by_title[category].append(record)
        else:
            custom.append(record)

    boxes: list[CategoryBox] = []
    seen: set[str] = set()
    for cat in categories:
        title = cat.title.strip()
        # Duplicate catalog titles share one bucket.
        if title in seen:
            continue
        seen.add(title)
        boxes.append(_make_box(cat.id, title, BoxKind.CATALOG, by_title[title]))

    custom_names = sorted({r.trimmed_category for r in custom})
    boxes.append(_make_box(CUSTOM_KEY, CUSTOM_TITLE, BoxKind.CUSTOM, custom, custom_names))
    boxes.append(
        _make_box(UNCATEGORIZED_KEY, UNCATEGORIZED_TITLE, BoxKind.UNCATEGORIZED, uncategorized)
    )
    return sort_boxes(boxes)
