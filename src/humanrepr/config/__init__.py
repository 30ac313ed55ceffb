"""Runtime configuration for the command-line layer."""
