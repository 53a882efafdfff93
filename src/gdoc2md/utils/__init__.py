#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by gdoc2md parsers and renderers."""
