"""Demonstration of the difference-engine sampler.

Samples ``P(x) = -7 + 10x - 0.8x^2 + 0.01x^3`` from ``x = 3`` in steps of
``0.1`` and compares every sample with direct evaluation. The header goes to
stderr and the table to stdout, so the output can be plotted directly:

    python demo_iterative_sampler.py > out.data

and, e.g. with gnuplot::

    set ylabel "Polynomial"; set y2label "Error Percent"
    set y2range [-0.5:0.5] ; set y2tics 0.1 ; set ytics nomirror
    plot "out.data" with lines, "" using 1:3 with lines, "" using 1:5 axes x1y2

Pass ``--fixed-point`` to use 32.32 fixed point registers instead of
``float32``.
"""

from __future__ import annotations

import sys

from diffkit.comparison import compare, format_header, format_table
from diffkit.polynomial import Polynomial
from diffkit.sampler.registers import DEFAULT_REGISTER_FORMAT, FixedPointRegisters

COEFFICIENTS = [-7.0, 10.0, -0.8, 0.01]  # c, x, x^2, x^3
X_START = 3.0
DX = 0.1
NUM_SAMPLES = 1000


def main() -> None:
    """Main comparison routine."""
    if "--fixed-point" in sys.argv[1:]:
        register_format = FixedPointRegisters(fraction_bits=32)
    else:
        register_format = DEFAULT_REGISTER_FORMAT

    p = Polynomial(COEFFICIENTS, degree=3)
    comparison = compare(p, X_START, DX, NUM_SAMPLES, register_format=register_format)

    sys.stderr.write(format_header(register_format, p.dtype))
    sys.stdout.write(format_table(comparison))
    sys.stderr.write(
        f"max |error| = {comparison.max_abs_error:.6g}, "
        f"max scaled error = {comparison.max_scaled_error:.3e}\n"
    )


if __name__ == "__main__":
    main()
