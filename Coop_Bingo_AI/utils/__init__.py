"""Settings, logging, and CLI helpers."""
