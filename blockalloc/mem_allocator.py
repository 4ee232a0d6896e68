import os
from collections import namedtuple

class AllocatorError(Exception):
    pass

class InvalidArgument(AllocatorError, ValueError):
    pass

class NoSuchAllocation(AllocatorError, KeyError):
    pass

class OutOfMemory(AllocatorError, MemoryError):
    pass

def log(*args, **kwargs):
    BLOCKALLOC_LOG = int(os.getenv("BLOCKALLOC_LOG", "0"))
    if BLOCKALLOC_LOG:
        color_id = 2
        color0 = f"\033[0;{30+(color_id % 8)}m"
        color1 = f"\033[0m"
        print(color0, f"[{BLOCKALLOC_LOG=}] ", *args, color1, **kwargs)

# read-only view handed out by snapshot()
BlockInfo = namedtuple("BlockInfo", ["start", "size", "allocated"])

class MemoryBlock:
    def __init__(self, start, size, allocated=False):
        self.start = start
        self.size = size
        self.allocated = allocated

    def __repr__(self):
        state = "A" if self.allocated else "F"
        return f"[{state}|{self.start}|{self.size}]"

def _check_int(name, value, minimum):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {value!r}")
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}")

class BlockAllocator:
    '''
    Linear space of `capacity` units kept as an address-ordered list of
    contiguous blocks. Three placement strategies share one split procedure,
    and every deallocation coalesces adjacent free blocks.

    `cursor` is the next-fit resume position. It is only a hint: after
    merges it can point at a different block or past the end of the list,
    so it is always taken modulo the block count.

    With strict=False deallocating an unknown address is ignored; with
    strict=True it raises NoSuchAllocation, as does a double free.
    '''
    STRATEGIES = ("first", "next", "best")

    def __init__(self, capacity=128, strict=False):
        _check_int("capacity", capacity, 1)
        self.capacity = capacity
        self.strict = strict
        self.reset()

    def reset(self):
        self.blocks = [MemoryBlock(0, self.capacity, False)]
        self.cursor = 0
        self.used_size = 0
        self.addr_bound = 0

    @property
    def free_size(self):
        return self.capacity - self.used_size

    def upper_bound(self):
        return self.addr_bound

    def __len__(self):
        return len(self.blocks)

    def __repr__(self):
        return f"BlockAllocator(capacity={self.capacity}, blocks={self.blocks})"

    def snapshot(self):
        return [BlockInfo(b.start, b.size, b.allocated) for b in self.blocks]

    def _find_first(self, size):
        for i, block in enumerate(self.blocks):
            if not block.allocated and block.size >= size:
                return i
        return None

    def _find_next(self, size):
        count = len(self.blocks)
        begin = self.cursor % count
        for k in range(count):
            i = (begin + k) % count
            block = self.blocks[i]
            if not block.allocated and block.size >= size:
                return i
        return None

    def _find_best(self, size):
        best = None
        for i, block in enumerate(self.blocks):
            if block.allocated or block.size < size:
                continue
            # strict '<' keeps the lowest start among equal sizes
            if best is None or block.size < self.blocks[best].size:
                best = i
        return best

    def _place(self, index, size):
        current = self.blocks[index]
        assert not current.allocated and current.size >= size
        if current.size > size:
            # cut extra free space into a separate block
            new_block = MemoryBlock(current.start + size, current.size - size, False)
            self.blocks.insert(index + 1, new_block)
            current.size = size
        current.allocated = True
        self.used_size += size
        self.addr_bound = max(self.addr_bound, current.start + size)
        return current.start

    def _allocate(self, size, strategy):
        _check_int("size", size, 1)
        if strategy == "first":
            index = self._find_first(size)
        elif strategy == "next":
            index = self._find_next(size)
        elif strategy == "best":
            index = self._find_best(size)
        else:
            raise InvalidArgument(f"unknown strategy {strategy!r}, expected one of {self.STRATEGIES}")

        if index is None:
            log(f"{strategy}-fit: no free block can hold {size} units (total free {self.free_size})")
            return None

        addr = self._place(index, size)
        if strategy == "next":
            self.cursor = index
        log(f"{strategy}-fit: allocated {size} units at {addr}")
        return addr

    def allocate_first_fit(self, size):
        return self._allocate(size, "first") is not None

    def allocate_next_fit(self, size):
        return self._allocate(size, "next") is not None

    def allocate_best_fit(self, size):
        return self._allocate(size, "best") is not None

    def allocate(self, size, strategy="first"):
        return self._allocate(size, strategy) is not None

    def malloc(self, size, strategy="first"):
        addr = self._allocate(size, strategy)
        if addr is None:
            raise OutOfMemory(f"Failed to find big enough block to hold {size} units "
                              f"(total free {self.free_size} units)")
        return addr

    def deallocate(self, start_addr):
        _check_int("start_addr", start_addr, 0)
        for block in self.blocks:
            if block.start == start_addr:
                if not block.allocated:
                    if self.strict:
                        raise NoSuchAllocation(f"block at addr {start_addr} is already free")
                else:
                    block.allocated = False
                    self.used_size -= block.size
                    log(f"freed {block.size} units at {start_addr}")
                self.merge_free_blocks()
                return
        if self.strict:
            raise NoSuchAllocation(f"Failed to free, no block at addr {start_addr}")
        log(f"ignored free of unknown addr {start_addr}")

    def merge_free_blocks(self):
        i = 0
        while i < len(self.blocks) - 1:
            current = self.blocks[i]
            following = self.blocks[i + 1]
            if not current.allocated and not following.allocated:
                log(f"merge {current} + {following}")
                current.size += following.size
                del self.blocks[i + 1]
                continue
            i += 1

    def check_invariants(self):
        assert len(self.blocks) > 0, "block list is empty"
        assert self.blocks[0].start == 0, f"first block starts at {self.blocks[0].start}"
        last = self.blocks[-1]
        assert last.start + last.size == self.capacity, \
            f"last block ends at {last.start + last.size}, capacity is {self.capacity}"
        for prev, block in zip(self.blocks, self.blocks[1:]):
            assert prev.start + prev.size == block.start, f"gap or overlap between {prev} and {block}"
            assert prev.allocated or block.allocated, f"adjacent free blocks {prev} {block}"
        assert all(b.size > 0 for b in self.blocks)
        assert sum(b.size for b in self.blocks) == self.capacity
        assert sum(b.size for b in self.blocks if b.allocated) == self.used_size
        return True
