"""Record context and profile resolution."""

from devassist.context.resolver import ResolvedContext, extract_record_id, resolve_context

__all__ = ["ResolvedContext", "extract_record_id", "resolve_context"]
