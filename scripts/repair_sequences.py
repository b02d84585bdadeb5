"""Check (and with --fix, repair) order_index sequences of every ordered table.

Run after a reorder failed partway:
  python scripts/repair_sequences.py --fix
"""
from __future__ import annotations
import argparse
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from services import admin as admin_svc
from utils.logging_setup import configure_logging


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--fix', action='store_true', help='renumber broken groups to 0..n-1')
    args = parser.parse_args(argv)
    configure_logging()

    broken = [r for r in admin_svc.check_sequences() if not r.ok]
    if not broken:
        print("[sequences] all groups contiguous")
        return 0
    for r in broken:
        print(f"[sequences] {r.table}/{r.group_key or '-'}: missing={r.missing} duplicates={r.duplicates}")
    if not args.fix:
        return 1
    changed = admin_svc.repair_all_sequences()
    print(f"[sequences] rewrote {changed} rows")
    return 0


if __name__ == "__main__":
    sys.exit(main())
