"""Reconcile free-text card lists against a reference catalog."""

from __future__ import annotations

__version__ = "0.1.0"
