"""Shared helpers: exceptions, logging, validation and formatting."""
