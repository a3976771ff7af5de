"""Reader plug-ins."""
