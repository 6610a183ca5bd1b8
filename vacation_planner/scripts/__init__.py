"""
Command line maintenance scripts.
"""
