# ======================================================================
# PATH: apps/core/tenant/context.py
# ======================================================================
from __future__ import annotations

from contextvars import ContextVar
from typing import Optional

from apps.core.models import Union

_current_union: ContextVar[Optional[Union]] = ContextVar("current_union", default=None)


def set_current_union(union: Optional[Union]) -> None:
    _current_union.set(union)


def get_current_union() -> Optional[Union]:
    return _current_union.get()


def clear_current_union() -> None:
    _current_union.set(None)
