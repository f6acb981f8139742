"""
Exposes the version of geotriangulation
"""
__version__ = 'v1.0.0'
