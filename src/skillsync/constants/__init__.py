"""Constant values shared across skillsync modules."""
