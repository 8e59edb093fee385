"""
Diagnostic utilities for debugging legend line-breaking.
Captures detailed information about a horizontal layout and its violations.
"""
from typing import List, Dict, Any, Sequence, Tuple
from dataclasses import dataclass

from .models import LayoutResult, LegendEntry

# Tolerance for float comparisons against the wrap bound
WIDTH_EPSILON = 1e-6


@dataclass
class LayoutDiagnostic:
    """Captures diagnostic information about a horizontal legend layout."""
    entry_count: int
    content_width: float
    word_wrap: bool
    line_widths: List[float]
    line_spans: List[Tuple[int, int]]
    stacked_runs: List[Tuple[int, int]]
    aligned: bool
    violations: List[Dict[str, Any]]

    def has_violations(self) -> bool:
        """Check if the layout breaks any layout property."""
        return not self.aligned or len(self.violations) > 0

    def summary(self) -> str:
        """Return a human-readable summary of the diagnostic."""
        lines = [
            f"=== Legend Layout Diagnostic ({self.entry_count} entries) ===",
            f"Content width: {self.content_width:.2f}px",
            f"Word wrap: {'on' if self.word_wrap else 'off'}",
            f"Arrays aligned: {self.aligned}",
            f"",
            f"Lines:",
        ]

        for i, (width, (start, end)) in enumerate(zip(self.line_widths, self.line_spans)):
            status = "✓ OK" if width <= self.content_width + WIDTH_EPSILON else "over bound"
            lines.append(f"  Line {i}: entries {start}-{end}, {width:.2f}px {status}")

        lines.extend([
            f"",
            f"Stacked runs: {self.stacked_runs}",
            f"",
            f"Total Violations: {len(self.violations)}",
        ])

        for v in self.violations:
            lines.append(f"    {v['kind']}: {v['detail']}")

        return "\n".join(lines)


def find_stacked_runs(entries: Sequence[LegendEntry]) -> List[Tuple[int, int]]:
    """
    Find runs of stacked entries.

    Returns:
        List of (first, last) index pairs; last is the label closing the run,
        or the final entry when the run trails off the end
    """
    runs = []
    start = None
    for i, entry in enumerate(entries):
        if entry.is_stacked:
            if start is None:
                start = i
        elif start is not None:
            runs.append((start, i))
            start = None

    if start is not None:
        runs.append((start, len(entries) - 1))
    return runs


def _line_spans(break_points: Sequence[bool]) -> List[Tuple[int, int]]:
    starts = [0] + [i for i, is_break in enumerate(break_points) if is_break and i > 0]
    ends = [s - 1 for s in starts[1:]] + [len(break_points) - 1]
    return list(zip(starts, ends))


def _group_count(entries: Sequence[LegendEntry], start: int, end: int) -> int:
    span = entries[start:end + 1]
    groups = sum(1 for entry in span if not entry.is_stacked)
    if span and span[-1].is_stacked:
        groups += 1
    return groups


def capture_layout_diagnostic(
    entries: Sequence[LegendEntry],
    result: LayoutResult,
    content_width: float,
    word_wrap: bool,
) -> LayoutDiagnostic:
    """
    Check a horizontal layout against its structural properties.

    Args:
        entries: Entries the layout was calculated for
        result: Layout to check
        content_width: Wrap bound used for the pass (available width * max size percent)
        word_wrap: Whether word-wrap was enabled

    Returns:
        LayoutDiagnostic with captured information
    """
    entries = tuple(entries)
    count = len(entries)
    aligned = len(result.label_sizes) == len(result.label_break_points) == count

    violations = []
    spans = _line_spans(result.label_break_points) if count else []
    runs = find_stacked_runs(entries)

    if count and len(spans) != result.line_count:
        violations.append({
            "kind": "line_count",
            "detail": f"{len(spans)} break spans but {result.line_count} line sizes",
        })

    if not word_wrap and count and result.line_count != 1:
        violations.append({
            "kind": "wrap_disabled",
            "detail": f"expected 1 line, got {result.line_count}",
        })

    # A break may land on a run's first member but never inside the run
    for first, last in runs:
        for i in range(first + 1, last + 1):
            if i < len(result.label_break_points) and result.label_break_points[i]:
                violations.append({
                    "kind": "split_run",
                    "detail": f"break at {i} inside stacked run {first}-{last}",
                })

    line_widths = [size.width for size in result.line_sizes]
    if word_wrap:
        for i, (width, (start, end)) in enumerate(zip(line_widths, spans)):
            # A single oversized group is allowed its own line
            if width > content_width + WIDTH_EPSILON and _group_count(entries, start, end) > 1:
                violations.append({
                    "kind": "wrap_bound",
                    "detail": f"line {i} is {width:.2f}px > {content_width:.2f}px",
                })

    return LayoutDiagnostic(
        entry_count=count,
        content_width=content_width,
        word_wrap=word_wrap,
        line_widths=line_widths,
        line_spans=spans,
        stacked_runs=runs,
        aligned=aligned,
        violations=violations,
    )
