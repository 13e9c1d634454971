"""Ambient infrastructure: configuration, errors, storage, logging, CLI."""
