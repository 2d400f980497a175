#!/usr/bin/env python3
"""
KeyScore Setup Configuration

This file provides compatibility for tools that expect setup.py.
All configuration is in pyproject.toml.
"""

from setuptools import setup

if __name__ == "__main__":
    setup()
