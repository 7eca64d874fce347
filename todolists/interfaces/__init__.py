"""Interface adapters for todolists (HTTP API and command line)."""
