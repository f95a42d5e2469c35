"""Core generation engine.

Pure building blocks of a generation pass, leaves first:

    variables    -> placeholder parsing and interpolation rewriting
    flatten      -> nested resource to single-level mapping
    functions    -> canonical function table
    diff         -> per-locale overrides
    inheritance  -> base locale resolution
    direction    -> rtl/ltr classification

Python 3.13+.
"""

from .diff import diff_function_table, effective_bodies, prune_inherited
from .direction import assign_directions, classify_direction
from .flatten import flatten, join_key, upper_first
from .functions import FunctionDescriptor, build_function, build_function_table, escape
from .inheritance import inheritance_chain, resolve_base
from .variables import parse_variables, replace_variables

__all__ = [
    "FunctionDescriptor",
    "assign_directions",
    "build_function",
    "build_function_table",
    "classify_direction",
    "diff_function_table",
    "effective_bodies",
    "escape",
    "flatten",
    "inheritance_chain",
    "join_key",
    "parse_variables",
    "prune_inherited",
    "replace_variables",
    "resolve_base",
    "upper_first",
]
