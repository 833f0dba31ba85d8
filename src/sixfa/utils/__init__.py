"""
Console and logging helpers for the sixfa command line
"""
