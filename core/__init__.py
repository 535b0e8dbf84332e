# ──────────────────────────────────────────────────────────────────────────────
# File: core/__init__.py
# Purpose: Package marker with NO eager submodule imports.
# ──────────────────────────────────────────────────────────────────────────────
__all__: list[str] = []
