"""Shared models and exceptions."""
