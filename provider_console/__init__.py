"""
Provider Console - Operator console for exchange provider instances

Headless controller for creating, editing, starting, stopping and inspecting
named provider instances of a trading platform, including schema-driven
adapter configuration and a filtered, paginated instrument browser.
"""

__version__ = "0.1.0"
__author__ = "Provider Console Team"
