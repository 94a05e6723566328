"""
Storm Harm Analytics
====================

Ranks NOAA storm event types by human harm (fatalities, injuries) and
economic harm (property and crop damage).

- The CLI entry point is in `stormharm/cli.py`.
- The API app factory is in `stormharm/main.py`.
- Dataset loading and normalization live in `stormharm/data/`.
"""

__version__ = "1.0.0"
