"""Utility helpers package for IDs and file I/O.

Modules here provide item ID and upload-name generation, and JSON
document I/O used by the inventory store.
"""
