"""
Command-line maintenance scripts.
"""
