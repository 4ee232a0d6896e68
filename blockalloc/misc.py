""" Some useful helpers on top of BlockAllocator.snapshot() """
import numpy as np

__all__ = [
    'format_blocks', 'occupancy_map', 'fragmentation_stats'
]

def format_blocks(blocks, unit="KB"):
    lines = []
    for b in blocks:
        status = "Allocated" if b.allocated else "Free"
        lines.append(f"Start: {b.start} {unit}, Size: {b.size} {unit}, {status}")
    return "\n".join(lines)

def occupancy_map(blocks, capacity):
    # one bool per unit, True where the unit belongs to an allocated block
    occupied = np.zeros(capacity, dtype=bool)
    for b in blocks:
        if b.allocated:
            occupied[b.start:b.start + b.size] = True
    return occupied

def fragmentation_stats(blocks):
    sizes = np.array([b.size for b in blocks], dtype=np.int64)
    allocated = np.array([b.allocated for b in blocks], dtype=bool)
    free_sizes = sizes[~allocated]

    total_free = int(free_sizes.sum())
    largest_free = int(free_sizes.max()) if free_sizes.size else 0
    if total_free == 0:
        external = 0.0
    else:
        external = 1.0 - largest_free / total_free
    return {
        "total_free": total_free,
        "total_allocated": int(sizes[allocated].sum()),
        "largest_free": largest_free,
        "free_blocks": int(free_sizes.size),
        "external_fragmentation": external,
    }
