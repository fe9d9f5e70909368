"""
JSON data-source plugin for the attributed property graph document.
"""
from .plugin import JsonDataSourcePlugin

__all__ = ['JsonDataSourcePlugin']
