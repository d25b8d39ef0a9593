#!/usr/bin/env python3
"""
Example: Building microtonal keyboards.

This demonstrates resolving tunings and laying out key frequencies,
cents offsets and names for a few different tuning systems.

Usage:
    python examples/build_keyboard.py
"""

from chuk_mcp_microtonal.core import parse_tuning, ratio_label, try_parse_tuning
from chuk_mcp_microtonal.keyboard import KeyboardManager, resolve
from chuk_mcp_microtonal.models import KeyboardConfig


def main() -> None:
    """Demonstrate the tuning engine."""
    print("CHUK Microtonal Keyboard Demo")
    print("=" * 40)
    print()

    # Ratio sets for a few limits
    for limit in (3, 5, 7):
        tuning = parse_tuning(f"{limit}-limit")
        labels = ", ".join(ratio_label(step, tuning) or "-" for step in range(tuning.step_count))
        print(f"{tuning.descriptor}: {tuning.step_count} ratios")
        print(f"  {labels}")
    print()

    # Invalid descriptors come back as values
    for descriptor in ("foo", "4-limit"):
        print(f"{descriptor!r}: {try_parse_tuning(descriptor)}")
    print()

    # Bohlen-Pierce: 13 equal steps of the tritave
    config = KeyboardConfig(base_freq=220.0, rows=2, columns=13, root_note=0, tuning="13ed3")
    table = resolve(config)
    print(f"{table.tuning.descriptor} keyboard ({len(table)} keys):")
    for row in table.grid():
        print("  " + " ".join(f"{k.frequency:7.2f}" for k in row if k.frequency is not None))
    print()

    # A 5-limit keyboard picking C E F G A out of the ratio set
    manager = KeyboardManager()
    manager.create(
        "just-major",
        KeyboardConfig(
            base_freq=264.0,
            rows=1,
            columns=8,
            tuning="5-limit",
            mapping="0 2 3 4 6",
            note_names="C E F G A",
        ),
    )
    just_major = manager.get("just-major")
    if just_major is None:
        return

    print("5-limit C E F G A:")
    for key in just_major.keys:
        if key.frequency is None:
            print(f"  {key.name:>2}  (silent)")
        else:
            print(f"  {key.name:>2}  {key.frequency:7.2f} Hz  {key.cents:5d}¢  {key.ratio}")


if __name__ == "__main__":
    main()
