"""Writer plug-ins."""
