"""
Plugin contracts — abstract base class for data-source plugins.
"""
from .base import DataSourcePlugin

__all__ = ['DataSourcePlugin']
