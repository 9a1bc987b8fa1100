"""
pmtr service setup core.

Installs and manages the pmtr service definition for the host's init system.
"""

__version__ = "1.2.0"
