"""
Binary Heap Demo -- Basic usage walk-through, heapify vs repeated push
construction cost, and per-pop extraction cost.

Generates:
- viz/*.png -- Individual visualization files
"""

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, str(Path(__file__).resolve().parent))
from binary_heap import BinaryHeap

logger = logging.getLogger(__name__)

SEED = 42
SIZES = (16, 64, 256, 1024, 4096)
VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


class ComparisonCounter:
    def __init__(self) -> None:
        self.count = 0


class Counted:
    """Integer wrapper that records every ``<`` into a shared counter."""

    __slots__ = ("value", "counter")

    def __init__(self, value: int, counter: ComparisonCounter) -> None:
        self.value = value
        self.counter = counter

    def __lt__(self, other: "Counted") -> bool:
        self.counter.count += 1
        return self.value < other.value


def count_push_comparisons(values: Sequence[int]) -> int:
    counter = ComparisonCounter()
    heap: BinaryHeap[Counted] = BinaryHeap()
    for v in values:
        heap.push(Counted(v, counter))
    return counter.count


def count_heapify_comparisons(values: Sequence[int]) -> int:
    counter = ComparisonCounter()
    BinaryHeap.from_unsorted(Counted(v, counter) for v in values)
    return counter.count


def count_pop_comparisons(values: Sequence[int]) -> List[int]:
    """Comparisons spent by each successive pop while draining a heap of ``values``."""
    counter = ComparisonCounter()
    heap = BinaryHeap.from_unsorted(Counted(v, counter) for v in values)
    per_pop = []
    while heap:
        counter.count = 0
        heap.pop()
        per_pop.append(counter.count)
    return per_pop


# ---------------------------------------------------------------------------
# Example 1: Basic Usage
# ---------------------------------------------------------------------------
def example_1_basic_usage() -> List[int]:
    """Interleave pushes and pops and show the values come out smallest first."""
    print("=" * 60)
    print("Example 1: Basic Usage")
    print("=" * 60)

    heap: BinaryHeap[int] = BinaryHeap()
    popped = []

    for v in (0, 1, 10):
        heap.push(v)
    print(f"  after push 0, 1, 10: {heap!r}")
    for _ in range(3):
        popped.append(heap.pop())
        print(f"  pop -> {popped[-1]}")

    for v in (45, 4534, 4):
        heap.push(v)
    print(f"  after push 45, 4534, 4: {heap!r}")
    while not heap.is_empty():
        popped.append(heap.pop())
        print(f"  pop -> {popped[-1]}")

    return popped


# ---------------------------------------------------------------------------
# Example 2: Construction Cost
# ---------------------------------------------------------------------------
def example_2_construction_cost(
    sizes: Sequence[int] = SIZES,
    seed: int = SEED,
    viz_dir: Optional[Path] = None,
) -> Dict[str, np.ndarray]:
    """Compare heapify against n pushes on the same random permutations."""
    print("\n" + "=" * 60)
    print("Example 2: Construction Cost (heapify vs repeated push)")
    print("=" * 60)

    rng = np.random.default_rng(seed)
    n = np.array(sizes)
    push_cmp = np.zeros(len(sizes), dtype=np.int64)
    heapify_cmp = np.zeros(len(sizes), dtype=np.int64)

    for i, size in enumerate(sizes):
        values = rng.permutation(size).tolist()
        push_cmp[i] = count_push_comparisons(values)
        heapify_cmp[i] = count_heapify_comparisons(values)

    print(f"\n  {'n':>8} {'push':>10} {'heapify':>10} {'push/n':>8} {'heapify/n':>10}")
    for size, p, h in zip(n, push_cmp, heapify_cmp):
        print(f"  {size:>8} {p:>10} {h:>10} {p / size:>8.2f} {h / size:>10.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(n, push_cmp, "o-", color=COLORS["red"], linewidth=2, label="Repeated push")
    axes[0].plot(n, heapify_cmp, "s-", color=COLORS["green"], linewidth=2, label="Heapify")
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Comparisons")
    axes[0].set_title("Total comparisons to build a heap", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(n, push_cmp / n, "o-", color=COLORS["red"], linewidth=2, label="Repeated push")
    axes[1].plot(n, heapify_cmp / n, "s-", color=COLORS["green"], linewidth=2, label="Heapify")
    axes[1].set_xscale("log", base=2)
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Comparisons per element")
    axes[1].set_title("Heapify stays flat: O(n) total", fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    _save(fig, viz_dir, "01_construction_cost.png")
    return {"n": n, "push": push_cmp, "heapify": heapify_cmp}


# ---------------------------------------------------------------------------
# Example 3: Extraction Cost
# ---------------------------------------------------------------------------
def example_3_extraction_cost(
    size: int = 1024,
    seed: int = SEED,
    viz_dir: Optional[Path] = None,
) -> np.ndarray:
    """Drain a heap and plot the comparisons each pop needs against 2*log2(n)."""
    print("\n" + "=" * 60)
    print("Example 3: Extraction Cost per Pop")
    print("=" * 60)

    rng = np.random.default_rng(seed)
    per_pop = np.array(count_pop_comparisons(rng.permutation(size).tolist()))
    remaining = np.arange(size, 0, -1)
    bound = 2 * np.log2(np.maximum(remaining, 1))

    print(f"  heap size: {size}")
    print(f"  mean comparisons per pop: {per_pop.mean():.2f}")
    print(f"  max comparisons per pop:  {per_pop.max()}")
    print(f"  2*log2(n) bound:          {2 * np.log2(size):.2f}")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(remaining, per_pop, ".", color=COLORS["blue"], markersize=3, label="Comparisons")
    ax.plot(remaining, bound, "-", color=COLORS["dark"], linewidth=1.5, label="2*log2(n)")
    ax.invert_xaxis()
    ax.set_xlabel("Elements in heap before pop")
    ax.set_ylabel("Comparisons")
    ax.set_title("Sift-down cost while draining the heap", fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)

    _save(fig, viz_dir, "02_extraction_cost.png")
    return per_pop


def _save(fig, viz_dir: Optional[Path], name: str) -> Path:
    out_dir = Path(viz_dir) if viz_dir is not None else VIZ_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / name
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info("  Saved: %s", path)
    return path


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_basic_usage()
    example_2_construction_cost()
    example_3_extraction_cost()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print("=" * 60)


if __name__ == "__main__":
    main()
