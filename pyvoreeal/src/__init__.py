# pyvoreeal/src/__init__.py
"""
PyVoreeal Core Module
---------------------
Region value type, its voxel-region conversion, property schema and archive.
"""
