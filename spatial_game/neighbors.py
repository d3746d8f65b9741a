"""
Moore neighbourhood on a bounded grid (no wraparound).
"""

# Row-major order; this fixes the order scores are accumulated and ties are broken in.
OFFSETS = [(-1, -1), (-1, 0), (-1, 1),
           (0, -1),           (0, 1),
           (1, -1),  (1, 0),  (1, 1)]

# One offset per unordered neighbour pair: the partner comes later in row-major order.
FORWARD_OFFSETS = [(dr, dc) for dr, dc in OFFSETS if (dr, dc) > (0, 0)]


def neighbors(rows, cols, r, c):
    """
    Coordinates of all cells at Chebyshev distance 1 from (r, c) inside [0,rows) x [0,cols).
    Corners have 3 neighbours, other border cells 5, interior cells 8.
    """
    out = []
    for dr, dc in OFFSETS:
        r2, c2 = r + dr, c + dc
        if 0 <= r2 < rows and 0 <= c2 < cols:
            out.append((r2, c2))
    return out


def neighbor_pairs(rows, cols):
    """Yield every unordered neighbour pair exactly once, lower (row-major) cell first."""
    for r in range(rows):
        for c in range(cols):
            for dr, dc in FORWARD_OFFSETS:
                r2, c2 = r + dr, c + dc
                if 0 <= r2 < rows and 0 <= c2 < cols:
                    yield (r, c), (r2, c2)


def _span(n, d):
    # indices i with 0 <= i < n and 0 <= i + d < n
    return slice(max(0, -d), n - max(0, d))


def aligned_slices(rows, cols, dr, dc):
    """
    Pair of index tuples (here, there) such that grid[there] holds, for every cell
    in grid[here], its neighbour at offset (dr, dc). Cells whose neighbour would fall
    off the board are left out.
    """
    here = (_span(rows, dr), _span(cols, dc))
    there = (slice(here[0].start + dr, here[0].stop + dr),
             slice(here[1].start + dc, here[1].stop + dc))
    return here, there
