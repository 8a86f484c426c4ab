#!/usr/bin/env python3
"""Thin entrypoint for the Hyprland window switcher."""

from __future__ import annotations

from hyprtui.switcher import main


if __name__ == "__main__":
    raise SystemExit(main())
