"""Application layer: quiz sessions and explain-mode tracing."""
