from .mem_allocator import (
    BlockAllocator,
    BlockInfo,
    MemoryBlock,
    AllocatorError,
    InvalidArgument,
    NoSuchAllocation,
    OutOfMemory,
    log,
)
from .misc import format_blocks, occupancy_map, fragmentation_stats
