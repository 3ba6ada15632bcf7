"""
Utility helpers for the imageoptim client
"""
