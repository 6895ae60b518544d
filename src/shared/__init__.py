"""Cross-cutting pieces: configuration, logging, and the error taxonomy."""
