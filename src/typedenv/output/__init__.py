"""Rendering of service results for the terminal."""
