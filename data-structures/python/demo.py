"""
Binary Heap Demo — Console walkthrough of the max and min variants, plus tree plots.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).parent / "src"))

from binary_heap import HeapEmptyError, HeapFullError, MaxHeap, MinHeap

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def tree_positions(n):
    """(x, y) for each storage index of an n-element complete binary tree."""
    idx = np.arange(n)
    depth = np.floor(np.log2(idx + 1)).astype(int)
    offset = idx - (2 ** depth - 1)
    x = (offset + 0.5) / 2.0 ** depth
    y = -depth.astype(float)
    return x, y


def draw_heap(ax, heap, title):
    elements = heap.describe()
    ax.set_title(title)
    ax.axis("off")
    if elements is None:
        ax.text(0.5, 0.5, "No elements", ha="center", va="center", fontsize=12, color="gray")
        return

    x, y = tree_positions(len(elements))
    for i in range(1, len(elements)):
        parent = (i - 1) // 2
        ax.plot([x[parent], x[i]], [y[parent], y[i]], color="gray", linewidth=1, zorder=1)

    color = "salmon" if isinstance(heap, MaxHeap) else "steelblue"
    ax.scatter(x, y, s=900, color=color, edgecolor="black", zorder=2)
    for xi, yi, value in zip(x, y, elements):
        ax.text(xi, yi, str(value), ha="center", va="center", fontsize=11, zorder=3)
    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(y.min() - 0.5, 0.5)


def insert_and_report(heap, value):
    try:
        heap.insert(value)
    except HeapFullError:
        print(f"  insert({value}): heap is full (capacity {heap.capacity()})")


def walkthrough(heap, label, filename):
    """Replay the classic sequence: insert 1, 4, 3, 6, 7; peek; extract; insert 1; drain."""
    print("=" * 60)
    print(f"{label} Demonstration")
    print("=" * 60)

    snapshots = []

    print("\n1. Adding elements: 1, 4, 3, 6, 7")
    for v in [1, 4, 3, 6, 7]:
        insert_and_report(heap, v)
    print(f"  Heap (level order): {heap}")
    print(f"  Size: {heap.size()}")
    snapshots.append((heap.copy(), "after inserting 1, 4, 3, 6, 7"))

    print(f"\n2. Peek: {heap.peek()}")

    print(f"\n3. Extract: {heap.extract()}")
    print(f"  Heap (level order): {heap}")
    print(f"  Size: {heap.size()}")
    snapshots.append((heap.copy(), "after one extract"))

    print("\n4. Adding element: 1")
    insert_and_report(heap, 1)
    print(f"  Heap (level order): {heap}")
    snapshots.append((heap.copy(), "after inserting 1"))

    print("\n5. Draining the heap")
    drained = []
    while heap:
        drained.append(heap.extract())
    print(f"  Extraction order: {drained}")
    print(f"  Heap: {heap}")

    try:
        heap.peek()
    except HeapEmptyError:
        print("  peek(): heap is empty")

    fig, axes = plt.subplots(1, len(snapshots), figsize=(5 * len(snapshots), 4))
    for ax, (snapshot, caption) in zip(axes, snapshots):
        draw_heap(ax, snapshot, caption)
    fig.suptitle(f"{label}: implicit tree (storage order)")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / filename, dpi=150)
    plt.close(fig)

    return fig, drained


def example_1_max_heap():
    return walkthrough(MaxHeap(10), "MaxHeap", "01_max_heap.png")


def example_2_min_heap():
    return walkthrough(MinHeap(10), "MinHeap", "02_min_heap.png")


def example_3_capacity():
    """Fill a small heap past its capacity, then extract past empty."""
    print("\n" + "=" * 60)
    print("Example 3: Capacity and Empty Conditions")
    print("=" * 60)

    heap = MaxHeap(3)
    for v in [5, sys.maxsize, -sys.maxsize - 1, 9]:
        insert_and_report(heap, v)
    print(f"  Heap: {heap!r}")

    for _ in range(4):
        try:
            print(f"  extract(): {heap.extract()}")
        except HeapEmptyError:
            print("  extract(): heap is empty")


def example_4_heapsort():
    """Random keys drained through both orderings."""
    print("\n" + "=" * 60)
    print("Example 4: Sorting by Repeated Extraction")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    values = [int(v) for v in rng.integers(-100, 100, size=31)]

    max_heap = MaxHeap.from_array(values)
    min_heap = MinHeap.from_array(values)
    descending = list(max_heap)
    ascending = list(min_heap)

    print(f"  Input:      {values}")
    print(f"  Descending: {descending}")
    print(f"  Ascending:  {ascending}")
    print(f"  Matches sorted(): {ascending == sorted(values) and descending == sorted(values, reverse=True)}")

    fig, axes = plt.subplots(2, 1, figsize=(14, 9))
    draw_heap(axes[0], max_heap, "MaxHeap.from_array (31 random keys)")
    draw_heap(axes[1], min_heap, "MinHeap.from_array (31 random keys)")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_heapify.png", dpi=150)
    plt.close(fig)

    return fig


def main():
    figures = []
    fig, _ = example_1_max_heap()
    figures.append(fig)
    print()
    fig, _ = example_2_min_heap()
    figures.append(fig)
    example_3_capacity()
    figures.append(example_4_heapsort())

    report_path = Path(__file__).parent / "report.pdf"
    with PdfPages(report_path) as pdf:
        for fig in figures:
            pdf.savefig(fig)

    print(f"\nVisualizations saved to {VIZ_DIR}")
    print(f"Report saved to {report_path}")


if __name__ == "__main__":
    main()
