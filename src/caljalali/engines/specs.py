"""
caljalali.engines.specs
-----------------------
Named Hijri calibrations. Pure data; pick one with ``HijriParams.like(name)``
and adjust with ``.tweak(calibration_offset=...)`` if the observed calendar
drifts away from the computed one.
"""

from __future__ import annotations

from typing import Dict

from .hijri import DEFAULT_HIJRI, HijriParams

# Tuned against the observed start of Sha'ban 1447 (2026-01-21)
HIJRI_IRAN = DEFAULT_HIJRI

# Uncalibrated tabular result
HIJRI_ARITHMETIC = HijriParams(calibration_offset=0, reference="no calibration")

HIJRI_SPECS: Dict[str, HijriParams] = {
    "iran": HIJRI_IRAN,
    "arithmetic": HIJRI_ARITHMETIC,
}
