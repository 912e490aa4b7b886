from __future__ import annotations


def main() -> None:
    from rootfinder import (
        BrentSolver,
        ErrorKind,
        RootFindingError,
        SolverConfig,
    )

    cfg = SolverConfig(
        relative_accuracy=1e-12, absolute_accuracy=1e-12, max_evaluations=200
    )
    solver = BrentSolver.from_config(cfg)

    res = solver.find_root_result(lambda x: x**3 - 2.0 * x - 5.0, 2.0, 3.0)
    print(f"root={res.root:.16f}  f(root)={res.f_at_root:.3e}")
    print(f"iters={res.iterations}  evals={res.evaluations}  bracket={res.bracket}")

    try:
        solver.find_root(lambda x: x * x + 1.0, -1.0, 1.0)
    except RootFindingError as err:
        if err.kind is ErrorKind.NO_BRACKET:
            print("No sign change:", err)


if __name__ == "__main__":
    main()
