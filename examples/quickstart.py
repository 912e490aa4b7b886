from __future__ import annotations


def main() -> None:
    import math

    from rootfinder import BrentSolver

    solver = BrentSolver(
        relative_accuracy=1e-14,
        absolute_accuracy=1e-15,
        function_value_accuracy=1e-15,
    )

    print("sqrt(2):", solver.find_root(lambda x: x * x - 2.0, 0.0, 2.0))
    print("Dottie:", solver.find_root(lambda x: math.cos(x) - x, 0.0, 1.0))
    ln2 = solver.find_root(lambda x: math.exp(x) - 2.0, 0.0, 1.0, initial=0.9)
    print("ln 2 (x0=0.9):", ln2)


if __name__ == "__main__":
    main()
