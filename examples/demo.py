#!/usr/bin/env python
"""
tensorlib Demo: Strided Flat-Buffer Tensors
===========================================

Walks through shape/stride arithmetic, coordinate lookups and
element-wise transformation.
"""

import sys
import os

# Add repository root to path so we can import tensorlib
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, parent_dir)

import tensorlib as tl


def demo_strides():
    """Demo: how a shape turns into a stride table."""
    print("\n" + "=" * 60)
    print("SHAPES AND STRIDES")
    print("=" * 60)

    for shape in [(6,), (2, 3), (2, 3, 4)]:
        print(f"  shape={shape}: total={tl.total_elements(shape)}, strides={tl.compute_strides(shape)}")


def demo_lookup():
    """Demo: N-dimensional positions map to flat offsets."""
    print("\n" + "=" * 60)
    print("COORDINATE LOOKUP")
    print("=" * 60)

    t = tl.Tensor([2, 3], [1, 2, 3, 4, 5, 6])
    print(f"\n{tl.format_dimensions(t)}")
    print(tl.format_tensor(t))

    with tl.options(echo_lookups=True):
        value = t.at([1, 2])
    print(f"\nat([1, 2]) -> offset 1*3 + 2*1 = 5 -> {value}")

    try:
        t.at([2, 0])
    except tl.IndexOutOfRange as err:
        print(f"at([2, 0]) -> {err}")


def demo_apply():
    """Demo: element-wise transformation returns a new tensor."""
    print("\n" + "=" * 60)
    print("ELEMENT-WISE APPLY")
    print("=" * 60)

    t = tl.Tensor([2, 3], [1, 2, 3, 4, 5, 6])
    doubled = t.element_wise_apply(lambda x: x * 2)
    print(f"\ndoubled:\n{tl.format_tensor(doubled)}")

    squared = t.element_wise_apply(lambda x: x * x, parallel=True, max_workers=2)
    print(f"squared (thread pool):\n{tl.format_tensor(squared)}")
    print(f"original untouched:\n{tl.format_tensor(t)}")

    z = tl.Tensor([2], [tl.Complex(3.0, 4.0), tl.Complex(0.0, 1.0)], dtype=tl.object_)
    moduli = [w.modulus for w in z.elements]
    print(f"\ncomplex moduli: {moduli}")


if __name__ == "__main__":
    tl.setup_logging()

    demo_strides()
    demo_lookup()
    demo_apply()

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)
