"""Worked Rust exercise answers, a rust-project.json writer and terminal status messages."""

__version__ = "5.0.0"