"""Concurrent pull-request aggregation across inferred metadata paths."""

from devassist.aggregate.aggregator import Lookup, aggregate
from devassist.aggregate.links import build_link, make_link_builder

__all__ = ["Lookup", "aggregate", "build_link", "make_link_builder"]
