"""Packaged resources for pyactuate (library defaults)."""
