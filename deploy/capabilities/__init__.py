"""Capability modules: each declares one slice of the stack from deploy.yaml."""

from deploy.capabilities.openings import openings_handler

__all__ = ["openings_handler"]
