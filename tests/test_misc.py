import numpy as np
import pytest
from blockalloc import BlockAllocator, format_blocks, occupancy_map, fragmentation_stats

def demo_allocator():
    mem = BlockAllocator(128)
    mem.allocate_first_fit(30)
    mem.allocate_next_fit(50)
    mem.allocate_best_fit(20)
    mem.deallocate(0)
    return mem

def test_format_blocks():
    text = format_blocks(demo_allocator().snapshot())
    assert text.splitlines() == [
        "Start: 0 KB, Size: 30 KB, Free",
        "Start: 30 KB, Size: 50 KB, Allocated",
        "Start: 80 KB, Size: 20 KB, Allocated",
        "Start: 100 KB, Size: 28 KB, Free",
    ]
    assert format_blocks(BlockAllocator(4).snapshot(), unit="words") == "Start: 0 words, Size: 4 words, Free"

def test_occupancy_map():
    mem = demo_allocator()
    occupied = occupancy_map(mem.snapshot(), mem.capacity)
    assert occupied.shape == (128,)
    assert occupied.sum() == mem.used_size == 70
    assert not occupied[:30].any()
    assert occupied[30:100].all()
    assert not occupied[100:].any()

def test_fragmentation_stats():
    stats = fragmentation_stats(demo_allocator().snapshot())
    assert stats["total_free"] == 58
    assert stats["total_allocated"] == 70
    assert stats["largest_free"] == 30
    assert stats["free_blocks"] == 2
    assert stats["external_fragmentation"] == pytest.approx(1 - 30 / 58)

def test_fragmentation_stats_edges():
    stats = fragmentation_stats(BlockAllocator(16).snapshot())
    assert stats["external_fragmentation"] == 0.0
    assert stats["largest_free"] == 16

    mem = BlockAllocator(16)
    mem.allocate_first_fit(16)
    stats = fragmentation_stats(mem.snapshot())
    assert stats["total_free"] == 0
    assert stats["largest_free"] == 0
    assert stats["free_blocks"] == 0
    assert stats["external_fragmentation"] == 0.0
    assert np.array_equal(occupancy_map(mem.snapshot(), 16), np.ones(16, dtype=bool))
