"""
Configuration package for the dormitory management service.

Holds environment settings and the logging dictConfig.
"""

from dormitory.config.settings import Settings, get_settings, settings

__all__ = ['Settings', 'get_settings', 'settings']
