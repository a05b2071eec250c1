"""Shared utilities: logging, exit codes and terminal output."""
