"""API module for WLC commands.

Functions defined here are the single source of truth for the CLI commands.
Each ``cmd_*`` function returns a StageResult and reports all failures through
its domain output schema.
"""

__all__: list[str] = []
