"""Top-level htmlcompose commands (one module per command)."""
