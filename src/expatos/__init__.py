"""
ExpatOS: document dependency analysis for expat residents.

Tracks identity and residency documents (passport, UAE visa, Emirates ID,
Ejari, health insurance) and flags the renewal risks that block a visa
renewal.
"""

__version__ = "0.1.0"
__author__ = "ExpatOS Team"

from expatos.config import get_settings

__all__ = ["get_settings", "__version__"]
