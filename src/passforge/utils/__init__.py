"""Shared helpers: character tables, typed errors and logging setup."""
