"""Diagnostics package.

Light-weight checks run from the CLI. Plots and vectorized tables need the
diagnostics extras (numpy, matplotlib).
"""

__all__ = ["pretty_month", "leap_years", "round_trip", "hijri_clamp", "nowruz_scatter"]
