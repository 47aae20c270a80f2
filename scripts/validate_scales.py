#!/usr/bin/env python3
"""Validate thermocmd scale formulas and reference catalog against known fixed points.

Cross-references:
  - Published water freezing / boiling points for every supported scale
  - Absolute zero on the absolute scales (Kelvin, Rankine)
  - The bundled reference catalog (one entry per scale, matching symbols)

Usage:
    python scripts/validate_scales.py
"""

from __future__ import annotations

import itertools
import math
import sys
from dataclasses import dataclass

from thermocmd.conversion.converter import convert_temperature
from thermocmd.models.scale import SCALES, TemperatureScale
from thermocmd.reference.catalog import load_catalog

# ---------------------------------------------------------------------------
# Ground truth: fixed points expressed in each scale
# ---------------------------------------------------------------------------


@dataclass
class FixedPoint:
    name: str
    celsius: float
    readings: dict[TemperatureScale, float]


T = TemperatureScale

FIXED_POINTS: list[FixedPoint] = [
    FixedPoint(
        "water freezes",
        0.0,
        {
            T.KELVIN: 273.15,
            T.FAHRENHEIT: 32.0,
            T.RANKINE: 491.67,
            T.REAUMUR: 0.0,
            T.ROMER: 7.5,
            T.NEWTON: 0.0,
            T.DELISLE: 150.0,
        },
    ),
    FixedPoint(
        "water boils",
        100.0,
        {
            T.KELVIN: 373.15,
            T.FAHRENHEIT: 212.0,
            T.RANKINE: 671.67,
            T.REAUMUR: 80.0,
            T.ROMER: 60.0,
            T.NEWTON: 33.0,
            T.DELISLE: 0.0,
        },
    ),
    FixedPoint("absolute zero", -273.15, {T.KELVIN: 0.0, T.RANKINE: 0.0}),
    FixedPoint("equal point", -40.0, {T.FAHRENHEIT: -40.0}),
]

SAMPLE_VALUES = [-273.15, -40.0, 0.0, 21.5, 100.0, 5505.0]
TOLERANCE = 1e-9


@dataclass
class Issue:
    severity: str  # "ERROR", "WARNING"
    category: str
    subject: str
    message: str


def validate_fixed_points() -> list[Issue]:
    """Check Celsius -> X and X -> Celsius against the ground-truth table."""
    issues: list[Issue] = []
    for point in FIXED_POINTS:
        for scale, expected in point.readings.items():
            forward = convert_temperature(point.celsius, T.CELSIUS, scale)
            if not math.isclose(forward, expected, abs_tol=TOLERANCE):
                issues.append(Issue(
                    "ERROR", "WRONG_FORWARD", f"{scale}",
                    f"{point.name}: {point.celsius} °C gave {forward}, expected {expected}",
                ))
            back = convert_temperature(expected, scale, T.CELSIUS)
            if not math.isclose(back, point.celsius, abs_tol=TOLERANCE):
                issues.append(Issue(
                    "ERROR", "WRONG_INVERSE", f"{scale}",
                    f"{point.name}: {expected} {SCALES[scale].symbol} gave {back} °C, "
                    f"expected {point.celsius}",
                ))
    return issues


def validate_round_trips() -> list[Issue]:
    """Every ordered pair of scales must round-trip sample values."""
    issues: list[Issue] = []
    for a, b in itertools.permutations(T, 2):
        for value in SAMPLE_VALUES:
            back = convert_temperature(convert_temperature(value, a, b), b, a)
            if not math.isclose(back, value, rel_tol=1e-12, abs_tol=TOLERANCE):
                issues.append(Issue(
                    "ERROR", "ROUND_TRIP", f"{a}->{b}",
                    f"{value} came back as {back}",
                ))
    for scale in T:
        for value in SAMPLE_VALUES:
            if convert_temperature(value, scale, scale) != value:
                issues.append(Issue(
                    "ERROR", "IDENTITY", f"{scale}", f"{value} drifted on identity conversion",
                ))
    return issues


def validate_catalog() -> list[Issue]:
    """The reference catalog must describe each registry scale exactly once."""
    issues: list[Issue] = []
    catalog = load_catalog()
    seen: dict[TemperatureScale, int] = {}
    for detail in catalog.temperature_scales:
        seen[detail.scale] = seen.get(detail.scale, 0) + 1
        if detail.symbol != SCALES[detail.scale].symbol:
            issues.append(Issue(
                "ERROR", "SYMBOL_MISMATCH", f"{detail.scale}",
                f"catalog symbol {detail.symbol!r} != registry {SCALES[detail.scale].symbol!r}",
            ))
        if not detail.formula:
            issues.append(Issue("WARNING", "NO_FORMULA", f"{detail.scale}", "missing formula"))
    for scale in T:
        count = seen.get(scale, 0)
        if count != 1:
            issues.append(Issue(
                "ERROR", "CATALOG_COVERAGE", f"{scale}",
                f"described {count} times in the catalog, expected once",
            ))
    return issues


def main() -> int:
    print("=" * 72)
    print("thermocmd Scale Validation")
    print("=" * 72)
    print()

    all_issues: list[Issue] = []

    sections = [
        ("1. FIXED POINTS", validate_fixed_points, "fixed points"),
        ("2. ROUND TRIPS", validate_round_trips, "round trips"),
        ("3. REFERENCE CATALOG", validate_catalog, "catalog entries"),
    ]
    for title, check, label in sections:
        print("─" * 72)
        print(title)
        print("─" * 72)
        issues = check()
        all_issues.extend(issues)
        _print_issues(issues, label)

    print("=" * 72)
    print("SUMMARY")
    print("=" * 72)
    errors = [i for i in all_issues if i.severity == "ERROR"]
    warnings = [i for i in all_issues if i.severity == "WARNING"]
    print(f"  ERRORS:   {len(errors)}")
    print(f"  WARNINGS: {len(warnings)}")

    return 1 if errors else 0


def _print_issues(issues: list[Issue], section: str) -> None:
    if not issues:
        print(f"  All {section} OK")
    else:
        for issue in issues:
            marker = {"ERROR": "X", "WARNING": "!"}[issue.severity]
            print(f"  [{marker}] {issue.subject}: {issue.message}")
    print()


if __name__ == "__main__":
    sys.exit(main())
