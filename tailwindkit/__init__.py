"""
tailwindkit - bootstrap launcher for the Tailwind CSS standalone CLI.

Finds ``tailwindcss`` on PATH, or installs the matching release binary into
``~/.tailwindcss``, then runs it with the given arguments.
"""

__version__ = "0.1.0"
