"""Test helper modules.

- renderables: Renderable doubles that count renders or fail on demand
"""
from __future__ import annotations
