"""Lexer, errors, inputs, manifests, dependency resolution and package scaffolding for circuit programs."""

__version__ = "0.1.0"