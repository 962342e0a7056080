"""Breach Check REST API."""
