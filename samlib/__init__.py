"""File-backed stores, a command output cache, shell and tmux helpers, and a terminal picker."""

__version__ = "1.3.0"