"""
Entry point for running tailwindkit as a module.

Usage: python -m tailwindkit [tailwindcss arguments]
"""

from tailwindkit.cli.app import run

if __name__ == "__main__":
    run()
