from .composition import flow, flow_right
from .flattening import flatten, flatten_deep, flatten_depth
from .grouping import group_by
from .iteratee import iteratee, property_of

__all__ = [
    "flatten",
    "flatten_deep",
    "flatten_depth",
    "flow",
    "flow_right",
    "group_by",
    "iteratee",
    "property_of",
]
