"""Filesystem browsing services."""
