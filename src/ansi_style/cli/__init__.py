"""Command-line interface for ansi-style."""

from ansi_style.cli.app import POLICY_ENV_VAR, create_app, policy_from_env, visible

__all__ = ["POLICY_ENV_VAR", "create_app", "policy_from_env", "visible"]
