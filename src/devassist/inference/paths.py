"""Infer the metadata paths that shape how a record looks and what it stores.

For every source root, in order, the engine emits:
  1. the object's fields directory (always)
  2. the record type definition (when a record type is known)
  3. the Lightning page and the page layout for the profile (when a profile is known)

Ordering is root-major and stable; downstream aggregation merges results in
exactly this order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from devassist.config import DEFAULT_SOURCE_ROOTS
from devassist.exceptions import InvalidContextError
from devassist.models import RecordContext

logger = logging.getLogger("devassist.inference")

RECORD_TYPE_EXTENSION = "recordType-meta.xml"
FLEXIPAGE_EXTENSION = "flexipage-meta.xml"
LAYOUT_EXTENSION = "layout-meta.xml"


def infer_paths(
    object_name: str,
    record_type: str | None = None,
    profile: str | None = None,
    roots: Sequence[str] = DEFAULT_SOURCE_ROOTS,
) -> list[str]:
    """Build the ordered list of candidate metadata paths.

    Args:
        object_name: API name of the object, e.g. ``Contact``.
        record_type: Record type developer name, or None.
        profile: Profile name of the current user, or None.
        roots: Source roots to search, in priority order.

    Returns:
        Directory paths (ending in ``/``) and metadata file paths.

    Raises:
        InvalidContextError: If ``object_name`` is empty.
    """
    if not object_name or not object_name.strip():
        raise InvalidContextError("Object name is required to infer metadata paths")

    # Blank values count as absent
    if record_type is not None and not record_type.strip():
        record_type = None
    if profile is not None and not profile.strip():
        profile = None

    paths: list[str] = []
    for root in roots:
        root = root.rstrip("/")
        paths.append(f"{root}/objects/{object_name}/fields/")

        if record_type:
            paths.append(
                f"{root}/objects/{object_name}/recordTypes/{record_type}.{RECORD_TYPE_EXTENSION}"
            )

        if profile:
            paths.append(f"{root}/flexipages/{_flexipage_name(object_name, record_type, profile)}")
            paths.append(f"{root}/layouts/{object_name}-{profile}.{LAYOUT_EXTENSION}")

    logger.debug(f"Inferred {len(paths)} paths for {object_name}: {paths}")
    return paths


def infer_paths_for_context(
    context: RecordContext,
    profile: str | None = None,
    roots: Sequence[str] = DEFAULT_SOURCE_ROOTS,
) -> list[str]:
    """Same as :func:`infer_paths`, taking a resolved record context."""
    return infer_paths(context.object_name, context.record_type, profile, roots)


def _flexipage_name(object_name: str, record_type: str | None, profile: str) -> str:
    # No record type: drop the segment instead of writing a placeholder
    if record_type:
        return f"{object_name}_{record_type}_{profile}.{FLEXIPAGE_EXTENSION}"
    return f"{object_name}_{profile}.{FLEXIPAGE_EXTENSION}"
