"""
Exposes the version of gulfdatum
"""
__version__ = 'v0.1.0'

__all__ = ['__version__']
