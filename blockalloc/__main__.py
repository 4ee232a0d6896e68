from .mem_allocator import BlockAllocator, AllocatorError
from .misc import format_blocks, fragmentation_stats
import argparse
import os

# the classic demo: 30 first-fit, 50 next-fit, 20 best-fit, then free addr 0
DEMO_OPS = ["first:30", "next:50", "best:20", "show", "free:0", "show"]

def parse_op(text):
    if text == "show":
        return ("show", None)
    kind, sep, value = text.partition(":")
    if not sep or kind not in ("first", "next", "best", "free"):
        raise ValueError(f"{text!r} not recognized, expected first:N, next:N, best:N, free:ADDR or show")
    try:
        return (kind, int(value))
    except ValueError:
        raise ValueError(f"{text!r} has a non-integer argument")

def show(mem, verbose):
    print(format_blocks(mem.snapshot()))
    if verbose:
        stats = fragmentation_stats(mem.snapshot())
        print(f"free {stats['total_free']} in {stats['free_blocks']} blocks, "
              f"largest {stats['largest_free']}, "
              f"external fragmentation {stats['external_fragmentation']:.2f}")
    print()

def run(mem, ops, verbose=False):
    shown = False
    for kind, value in ops:
        if kind == "show":
            show(mem, verbose)
            shown = True
            continue
        shown = False
        if kind == "free":
            mem.deallocate(value)
        elif not mem.allocate(value, kind):
            print(f"{kind}-fit {value}: failed")
    if not shown:
        show(mem, verbose)

def main(argv=None):
    parser = argparse.ArgumentParser(
            prog="python -m blockalloc",
            description="Replay allocation requests against a simulated block allocator",
            )
    parser.add_argument('ops', nargs='*', help='first:N, next:N, best:N, free:ADDR or show (default: the classic demo)')
    parser.add_argument('-c', '--capacity', type=int,
                        default=int(os.getenv("BLOCKALLOC_CAPACITY", "128")),
                        help='total units of the simulated memory')
    parser.add_argument('--strict', action="store_true", help='fail on freeing an unknown address')
    parser.add_argument('-v', '--verbose', action="store_true", help='print fragmentation statistics')
    args = parser.parse_args(argv)

    try:
        ops = [parse_op(op) for op in (args.ops or DEMO_OPS)]
        mem = BlockAllocator(args.capacity, strict=args.strict)
        run(mem, ops, args.verbose)
    except (ValueError, AllocatorError) as e:
        parser.error(str(e))
    return 0

if __name__ == "__main__":
    main()
