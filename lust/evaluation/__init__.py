"""Expansion and evaluation passes over nodes."""
