#!/usr/bin/env python3
"""Floating-point linting script for the Hydra engine.

The pricing engine must be integer-only: its lossy behaviors (exp
saturation, rational degrading to 0) are defined in exact integer terms
and any float would make results platform-dependent. This script scans
the package for float patterns and should be run as part of CI.

Source is read with the tokenizer, so strings, docstrings and comments
never produce findings.

Usage:
    python scripts/check_no_float.py [--verbose]

Exit codes:
    0 - No issues found
    1 - Issues found (with details printed)
"""

import argparse
import io
import sys
import tokenize
from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Issue:
    """A detected floating-point pattern."""

    file: Path
    line_num: int
    line: str
    pattern: str
    message: str
    suggestion: str | None = None


# Directories to scan
SCAN_DIRS = ["hydra"]

# Files/directories to completely skip
SKIP_PATHS = ["__pycache__"]

# Allowlist: specific files where certain patterns are acceptable
# Format: {file_pattern: [list of allowed pattern names]}
ALLOWLIST = {
    "fixed_point.py": ["decimal_division"],  # from_fixed() display helper
}

# Literal text inside f-strings (and t-strings) is its own token type
TEXT_TOKENS = {tokenize.STRING, tokenize.COMMENT} | {
    getattr(tokenize, name) for name in ("FSTRING_MIDDLE", "TSTRING_MIDDLE") if hasattr(tokenize, name)
}


def should_skip_file(path: Path) -> bool:
    """Check if file should be completely skipped."""
    path_str = str(path)
    return any(skip in path_str for skip in SKIP_PATHS)


def is_allowlisted(path: Path, pattern_name: str) -> bool:
    """Check if a pattern is allowlisted for this file."""
    path_str = str(path)
    for file_pattern, allowed in ALLOWLIST.items():
        if file_pattern in path_str and pattern_name in allowed:
            return True
    return False


def is_float_literal(number: str) -> bool:
    """True for 1.5, 1e18, 2j and friends; False for ints in any base."""
    lowered = number.lower()
    if lowered.startswith(("0x", "0o", "0b")):
        return False
    return any(marker in lowered for marker in (".", "e", "j"))


def _code_tokens(lines: list[str]) -> dict[int, list[tokenize.TokenInfo]]:
    """Group live code tokens by line number."""
    by_line: dict[int, list[tokenize.TokenInfo]] = defaultdict(list)
    readline = io.StringIO("\n".join(lines)).readline
    for token in tokenize.generate_tokens(readline):
        if token.type in TEXT_TOKENS:
            continue
        if token.type in (tokenize.NAME, tokenize.NUMBER, tokenize.OP):
            by_line[token.start[0]].append(token)
    return by_line


def _line_findings(tokens: list[tokenize.TokenInfo]) -> Iterator[tuple[str, str, str]]:
    """Yield (pattern, message, suggestion) for one line of code tokens."""
    words = [t.string for t in tokens]

    for current, following in zip(words, words[1:]):
        if (current, following) in (("import", "math"), ("from", "math")):
            yield "math import", "The math module works on floats", "Use hydra.math.fixed_point"
        if (current, following) == ("float", "("):
            yield "float conversion", "float() in engine code", "Keep the value as a fixed-point int"

    for token in tokens:
        if token.type == tokenize.NUMBER and is_float_literal(token.string):
            yield "float literal", "Float literal in engine code", "Write the value scaled by 10**18"
        if token.type == tokenize.OP and token.string in ("/", "/="):
            yield "true division", "'/' produces a float", "Use // or mul_div()"


def check_file(path: Path, lines: list[str]) -> Iterator[Issue]:
    """Check one file for every float pattern."""
    try:
        by_line = _code_tokens(lines)
    except (tokenize.TokenError, SyntaxError) as e:
        yield Issue(
            file=path,
            line_num=0,
            line="",
            pattern="unreadable",
            message=f"Could not tokenize: {e}",
        )
        return

    for line_num in sorted(by_line):
        tokens = by_line[line_num]
        decimal_line = any(t.string == "Decimal" for t in tokens)
        for pattern, message, suggestion in _line_findings(tokens):
            if pattern == "true division" and decimal_line and is_allowlisted(path, "decimal_division"):
                continue
            yield Issue(
                file=path,
                line_num=line_num,
                line=lines[line_num - 1].rstrip() if line_num <= len(lines) else "",
                pattern=pattern,
                message=message,
                suggestion=suggestion,
            )


def scan_file(path: Path) -> list[Issue]:
    """Scan a single file for float patterns."""
    if should_skip_file(path):
        return []

    try:
        lines = path.read_text().split("\n")
    except OSError as e:
        print(f"Warning: Could not read {path}: {e}", file=sys.stderr)
        return []

    return list(check_file(path, lines))


def print_report(issues: list[Issue], verbose: bool) -> None:
    """Print the audit report."""
    if not issues:
        print("✓ No floating-point patterns found!")
        return

    print(f"\n{'=' * 70}")
    print(f"FLOAT AUDIT RESULTS: {len(issues)} issue(s)")
    print(f"{'=' * 70}\n")

    for issue in issues:
        print(f"  {issue.file}:{issue.line_num}")
        print(f"    {issue.pattern}: {issue.message}")
        if verbose:
            print(f"    > {issue.line.strip()[:70]}")
            if issue.suggestion:
                print(f"    Suggestion: {issue.suggestion}")
        print()


def main() -> None:
    parser = argparse.ArgumentParser(description="Floating-point linter for the Hydra engine")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    base_dir = Path(__file__).parent.parent
    issues = []

    for scan_dir in SCAN_DIRS:
        dir_path = base_dir / scan_dir
        if dir_path.exists():
            for py_file in sorted(dir_path.rglob("*.py")):
                issues.extend(scan_file(py_file))

    print_report(issues, args.verbose)
    sys.exit(1 if issues else 0)


if __name__ == "__main__":
    main()
