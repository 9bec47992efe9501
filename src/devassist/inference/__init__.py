"""Metadata path inference for a record context."""

from devassist.inference.paths import infer_paths, infer_paths_for_context

__all__ = ["infer_paths", "infer_paths_for_context"]
