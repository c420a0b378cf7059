"""
Headless provider console: form sessions, detail view, lifecycle actions
and operator notices.
"""
