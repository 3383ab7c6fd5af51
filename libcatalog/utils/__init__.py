"""Library Catalog - Presentation Utilities

- Output formatting for plain / json / rich modes (ui_helpers.py)
- Input validation for the interactive menu (validators.py)
"""
