#!/usr/bin/env python3
"""
Main CLI entry point for remoji
"""

from remoji.commands.lookup import app


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
