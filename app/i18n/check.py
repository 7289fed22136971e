"""Command-line locale parity check for CI.

Exits non-zero and lists the gaps when any locale lacks a key that
another locale defines::

    python -m app.i18n.check
"""

from __future__ import annotations

import sys

from app.i18n import missing_keys


def main() -> int:
    gaps = {lang: keys for lang, keys in missing_keys().items() if keys}
    if not gaps:
        print("All locales share the same keys.")
        return 0
    for lang, keys in sorted(gaps.items()):
        print(f"{lang}: missing {len(keys)} key(s)")
        for key in sorted(keys):
            print(f"  {key}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
