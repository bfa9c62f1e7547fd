"""
Color the Bear - A Coloring Book for Kids

A Textual TUI application:
- A bear made of pixel grids (ears, head, body, legs)
- Tap a pixel to flood-fill its patch with the selected color
- Pick colors from the panel or with number keys 1-7

Designed for ages 3-8. Calm, simple, one screen.
"""

__version__ = "1.0.0"
