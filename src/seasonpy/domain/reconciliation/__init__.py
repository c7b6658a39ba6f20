"""Reconciliation of season catalog entries with the local library."""

from __future__ import annotations

from .arbiter import reconcile_entry
from .resolve import resolve_identity

__all__ = ["reconcile_entry", "resolve_identity"]
