"""Note category registry helpers and defaults.

Updates:
  v0.1.0 - 2026-10-07 - Introduce CategoryRegistry with the default Work/Personal/Ideas set.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger("note_keeper.categories")

DEFAULT_CATEGORIES: tuple[str, ...] = ("Work", "Personal", "Ideas")


class CategoryRegistry:
    """Ordered set of categories offered to the user.

    Membership is advisory: notes may carry any category text.
    """

    def __init__(self, categories: Iterable[str] | None = None) -> None:
        self._categories: list[str] = []
        source = DEFAULT_CATEGORIES if categories is None else categories
        for raw in source:
            label = str(raw).strip()
            if not label:
                logger.warning("Skipping empty category label")
                continue
            if label not in self._categories:
                self._categories.append(label)

    def all(self) -> list[str]:
        return list(self._categories)

    def is_known(self, category: str) -> bool:
        """Return True when *category* belongs to the configured set."""
        return category in self._categories

    def __len__(self) -> int:
        return len(self._categories)


__all__ = ["CategoryRegistry", "DEFAULT_CATEGORIES"]
