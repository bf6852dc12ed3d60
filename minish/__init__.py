"""Command-line handling for a small shell: syntax checks, expansion, tokens, redirections and builtins."""

__version__ = "0.1.0"