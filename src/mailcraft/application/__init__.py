"""Application layer - assembling emails from their parts."""

from mailcraft.application.email_builder import BuildResult, EmailBuilder

__all__ = ["EmailBuilder", "BuildResult"]
