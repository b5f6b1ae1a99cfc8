"""
Entry point for running the tailwindkit CLI as a module.

Usage: python -m tailwindkit.cli [tailwindcss arguments]
"""

from .app import run

if __name__ == "__main__":
    run()
