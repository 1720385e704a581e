"""Inkwell blogging platform API."""
