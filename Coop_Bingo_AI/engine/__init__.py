"""Rules engine pieces: line detection, validation, errors, events, and state records."""
