"""Local HTTP API for the grading suite."""
