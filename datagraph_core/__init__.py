"""
Data Graph core — columnarization services and platform facade.
"""
