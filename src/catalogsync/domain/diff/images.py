"""Variant image diffing; images are matched by url."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.actions import AddExternalImage, MoveImageToPosition, RemoveImage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogsync.domain.actions import ImageAction
    from catalogsync.domain.model import Image

    from .policy import DiffOptions


def build_image_actions(
    variant_id: int,
    existing: Sequence[Image],
    draft: Sequence[Image],
    options: DiffOptions,
) -> list[ImageAction]:
    """Remove, add, then move images until the list matches the draft order.

    Moves are computed against a simulation of the list the platform holds
    after removals and additions (additions append). Kept images that the
    draft does not mention stay behind the draft images.
    """

    unique: dict[str, Image] = {}
    for image in draft:
        unique.setdefault(image.url, image)
    draft = list(unique.values())
    draft_urls = list(unique)
    existing_urls = [image.url for image in existing]
    wanted = set(draft_urls)
    present = set(existing_urls)

    actions: list[ImageAction] = []
    extras = [url for url in existing_urls if url not in wanted]
    if options.remove_other_collection_entries:
        actions.extend(RemoveImage(variant_id=variant_id, image_url=url) for url in extras)
        extras = []
    actions.extend(
        AddExternalImage(variant_id=variant_id, image=image)
        for image in draft
        if image.url not in present
    )

    current = [url for url in existing_urls if url in wanted or url in extras]
    current.extend(url for url in draft_urls if url not in present)
    target = [*draft_urls, *extras]
    for position, url in enumerate(target):
        if current[position] == url:
            continue
        actions.append(MoveImageToPosition(variant_id=variant_id, image_url=url, position=position))
        current.remove(url)
        current.insert(position, url)
    return actions
