"""Kernel value-object types — public re-export surface.

Modules:
  label.py  — TypeLabel
"""

from cachekeys.kernel.types.label import TypeLabel

__all__ = ["TypeLabel"]
