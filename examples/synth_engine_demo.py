#!/usr/bin/env python3
"""Demo script for building a parameter tree with paramtreelib.

This script builds a small synth engine description in memory, turns it
into an immutable parameter tree and prints the hierarchy together with
each parameter's resolved dependents.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from paramtreelib import (
    BuildConfig,
    ExportedGroup,
    ParameterSet,
    ParameterUnit,
    build_and_resolve,
    export_tree,
    get_tree_stats,
)


def create_engine() -> ParameterSet:
    """Describe a two-oscillator synth."""
    engine = ParameterSet("synth", "Synth")
    engine.add_parameter("master", "Master", min=-60.0, max=6.0,
                         unit=ParameterUnit.DECIBELS, dependents=["filter.cutoff"])

    for index in (1, 2):
        osc = engine.add_set(f"osc{index}", f"Oscillator {index}")
        osc.add_parameter("tune", "Tune", min=-24.0, max=24.0, unit=ParameterUnit.SEMITONES)
        osc.add_parameter("fine", "Fine", min=-100.0, max=100.0, unit=ParameterUnit.CENTS,
                          dependents=["tune"])
        osc.add_parameter("level", "Level", unit=ParameterUnit.LINEAR_GAIN, default=0.8)

    filt = engine.add_set("filter", "Filter")
    filt.add_parameter("cutoff", "Cutoff", min=20.0, max=20000.0, default=1000.0,
                       unit=ParameterUnit.HERTZ, dependents=["env.amount", "osc1::level"])
    filt.add_parameter("resonance", "Resonance", unit=ParameterUnit.PERCENT)
    env = filt.add_set("env", "Envelope")
    env.add_parameter("amount", "Amount", min=-1.0, max=1.0)
    env.add_parameter("attack", "Attack", max=5000.0, unit=ParameterUnit.MILLISECONDS,
                      dependents=["cutoff"])
    return engine


def print_group(tree, group: ExportedGroup, indent: int = 0):
    """Print a group and everything beneath it."""
    pad = "  " * indent
    for child in group.children:
        if isinstance(child, ExportedGroup):
            print(f"{pad}[G] {child.display_name} ({child.key})")
            print_group(tree, child, indent + 1)
            continue

        low, high = child.range
        deps = ", ".join(node.key for node in tree.dependents_of(child.address))
        line = f"{pad}[P] {child.display_name}: {low:g}..{high:g}{child.unit.suffix}"
        if deps:
            line += f"  -> {deps}"
        print(line)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    engine = create_engine()
    root, report = build_and_resolve(engine, BuildConfig(root_key=engine.key, root_name=engine.name))
    tree = export_tree(root)

    print("\n=== Parameter Tree ===")
    print_group(tree, tree.root)

    print("\n=== Statistics ===")
    for key, value in get_tree_stats(root).items():
        print(f"  {key}: {value}")

    if not report.complete:
        print("\nUnresolved dependents:")
        for parameter, name in report.unresolved:
            print(f"  {parameter} -> {name}")


if __name__ == "__main__":
    main()
