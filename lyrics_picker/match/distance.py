from __future__ import annotations

import regex

_FEATURING_RE = regex.compile(r"f(?:ea)?t\.?", regex.IGNORECASE)

DELETE_COST = 1
INSERT_COST = 2
SUBSTITUTE_COST = 3


def normalize_name(name: str) -> str:
    """
    Lowercase, drop "feat"/"ft" markers, then sort the whitespace-separated
    tokens and glue them back together without separators.

    "Jude Hey feat. X" -> "heyjudex"
    """
    stripped = _FEATURING_RE.sub("", name.lower())
    return "".join(sorted(stripped.split()))


def distance(a: str, b: str) -> int:
    """
    Weighted edit distance between two names after normalization.

    Costs: match 0, delete from `a` 1, insert from `b` 2, substitute 3.
    Not symmetric: distance(a, b) may differ from distance(b, a).
    """
    a = normalize_name(a)
    b = normalize_name(b)

    # single-row DP; `diag` holds the previous row's value at j - 1
    costs = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        costs[0] = i
        diag = i - 1
        for j in range(1, len(b) + 1):
            substitute = diag if a[i - 1] == b[j - 1] else diag + SUBSTITUTE_COST
            best = min(costs[j] + DELETE_COST, costs[j - 1] + INSERT_COST, substitute)
            diag = costs[j]
            costs[j] = best
    return costs[len(b)]
