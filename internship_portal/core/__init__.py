"""
Core module - settings, logging, errors and identity.
"""
