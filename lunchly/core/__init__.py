"""Core records, repositories and errors for Lunchly."""
