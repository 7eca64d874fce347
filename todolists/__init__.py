"""todolists - task lists and saved filters over them."""

__version__ = "0.1.0"
