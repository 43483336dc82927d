"""Geometry helpers.

This package is intentionally small and dependency-light.

Cross-check tooling lives here: optional adapters (svgelements) that can
be used in debug harnesses without affecting the parser itself.
"""

from __future__ import annotations
