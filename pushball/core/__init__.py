"""Core engine glue: logging, settings, services and the main loop."""
