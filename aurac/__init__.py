"""Toolchain core for AURA documents: diagnostics, lexing, configuration, history and .atlas output."""

__version__ = "0.1.0"