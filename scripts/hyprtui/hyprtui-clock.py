#!/usr/bin/env python3
"""Thin entrypoint for the calendar clock."""

from __future__ import annotations

from hyprtui.clock import main


if __name__ == "__main__":
    raise SystemExit(main())
