"""Obsidian vault backend."""
