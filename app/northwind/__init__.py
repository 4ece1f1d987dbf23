"""
Northwind data layer.

`NorthwindContext` owns the engine and sessions; feature modules under
`app.northwind.modules` own their models, repositories and services.
"""

from app.northwind.config import Settings, load_settings
from app.northwind.db import NorthwindContext

__all__ = ["NorthwindContext", "Settings", "load_settings"]
