#!/usr/bin/env python3
"""
Main entrypoint for patchenv
Delegates to the CLI in core/cli.py
"""
from patchenv.core.cli import cli

if __name__ == '__main__':
    cli()
