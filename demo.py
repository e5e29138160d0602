# demo.py
"""
Command-line driver: build an array, run a short scripted workload,
print the live elements and tear the array down.

    python demo.py --count 10 --rotate -3 --find 7 --audit
"""
import argparse
import sys

from dynarray import (
    CONFIG,
    AuditLog,
    DynamicArray,
    DynamicArrayError,
    NOT_FOUND,
    configure_logging,
)


# ------------------------------------------------------------
# 1. Argument parsing
# ------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dynamic array demo driver")
    parser.add_argument("--count", type=int, default=10, help="number of values 0..count-1 to push")
    parser.add_argument("--rotate", type=int, default=None, help="rotate right by this signed count")
    parser.add_argument("--find", type=int, default=None, help="look up a value with transposition")
    parser.add_argument("--pop", type=int, default=0, help="pop this many values at the end")
    parser.add_argument("--dtype", default=CONFIG["dtype"], help="element type (default: %(default)s)")
    parser.add_argument("--audit", action="store_true", help="print the operation audit summary")
    parser.add_argument("--verbose", action="store_true", help="enable DEBUG logging")
    return parser


# ------------------------------------------------------------
# 2. Scripted workload
# ------------------------------------------------------------
def run(args: argparse.Namespace, out=None) -> int:
    out = out if out is not None else sys.stdout
    log = AuditLog() if args.audit else None

    with DynamicArray(dtype=args.dtype, audit=log) as arr:
        for value in range(args.count):
            arr.push(value)

        if args.rotate is not None:
            arr.rotate_right_n(args.rotate)

        if args.find is not None:
            position = arr.find_transposition(args.find)
            if position == NOT_FOUND:
                print(f"find {args.find}: not found", file=out)
            else:
                print(f"find {args.find}: now at index {position}", file=out)

        for _ in range(args.pop):
            print(f"pop -> {arr.pop()}", file=out)

        arr.dump(out)
        print(f"size={arr.size()} capacity={arr.capacity()}", file=out)

    if log is not None:
        print(log.describe(), file=out)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args)
    except DynamicArrayError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
