"""
Data models and admin API payload parsing.
"""
