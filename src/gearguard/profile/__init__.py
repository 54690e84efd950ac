"""Behavioral profile construction."""

from gearguard.profile.builder import ProfileBuilder

__all__ = ["ProfileBuilder"]
