"""
API route modules.
"""

from expatos.api.routes import analysis, dashboard, documents

__all__ = ["analysis", "dashboard", "documents"]
