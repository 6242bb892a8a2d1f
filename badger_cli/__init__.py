"""
Badger CLI - Command-line interface for badge layout and rendering.

Usage:
    badger-cli layout --config config/badge.yaml --size 64x64
    badger-cli render --config config/badge.yaml --input avatar.png --output out.png
"""

__version__ = "1.0.0"
