# ======================================================================
# PATH: apps/core/tenant/__init__.py
# ======================================================================
from .context import (
    get_current_union,
    set_current_union,
    clear_current_union,
)
from .resolver import resolve_union_from_request
from .exceptions import TenantResolutionError

__all__ = [
    "get_current_union",
    "set_current_union",
    "clear_current_union",
    "resolve_union_from_request",
    "TenantResolutionError",
]
