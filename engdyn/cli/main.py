"""
Command-line interface for the engineering dynamics cookbook.

Usage:
    python -m engdyn list
    python -m engdyn example 2.3 [--output result.json] [--readable]
    python -m engdyn root-find --integrand "sqrt(0.04+0.08*B^2)" --variable B \
        --target 2.5 --upper 10 --margin 0.005
    python -m engdyn derivative --x "t^2" --y 0 --z 0 --time 2 --interval 1e-3
    python -m engdyn gravity --mass 5.9722e24 --radius 6378137
"""

import argparse
import sys
from pathlib import Path
from tokenize import TokenError

import numpy as np
from pydantic import ValidationError
from sympy import SympifyError

from engdyn import symbolic
from engdyn.cli.readable_output import format_example
from engdyn.models.inputs import SearchPolicy, SearchStrategy
from engdyn.models.outputs import DerivativeOutput, GravityOutput, RootFindOutput
from engdyn.numerics.root_finding import root_find_parametric
from engdyn.physics.forces import gravitational_acceleration_magnitude
from engdyn.physics.units import EARTH_MASS_KG, EARTH_RADIUS_M
from engdyn.physics.vector_expr import VectorExpr3D
from engdyn.worked_examples import list_examples, run_example

# Errors reported as "Error: ..." with exit code 1
USER_ERRORS = (ValueError, KeyError, ValidationError, SyntaxError, SympifyError, TokenError)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="engdyn",
        description="Engineering Dynamics cookbook - textbook formulas, worked "
                    "examples and the numeric routines behind them.",
    )
    parser.add_argument("--version", action="version", version="engdyn 0.1.0")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list command
    subparsers.add_parser(
        "list",
        help="List the available worked examples",
    )

    # example command
    example_parser = subparsers.add_parser(
        "example",
        help="Run a worked example",
    )
    example_parser.add_argument(
        "key",
        help="Example identifier, e.g. 2.3 (see 'list')",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    example_parser.add_argument(
        "--readable",
        action="store_true",
        help="Print a plain-text summary instead of JSON",
    )

    # root-find command
    root_parser = subparsers.add_parser(
        "root-find",
        help="Find the upper limit at which an integral reaches a target",
    )
    root_parser.add_argument(
        "--integrand",
        required=True,
        help="Integrand expression, e.g. 'sqrt(0.04+0.08*B^2)'",
    )
    root_parser.add_argument(
        "--variable",
        default=None,
        help="Integration variable (inferred when the integrand has one symbol)",
    )
    root_parser.add_argument(
        "--target",
        type=float,
        required=True,
        help="Target value of the integral",
    )
    root_parser.add_argument(
        "--lower",
        type=float,
        default=0.0,
        help="Lower limit of integration (default: 0)",
    )
    root_parser.add_argument(
        "--upper",
        type=float,
        required=True,
        help="Largest upper limit to try",
    )
    root_parser.add_argument(
        "--margin",
        type=float,
        required=True,
        help="Tolerance on the integral",
    )
    root_parser.add_argument(
        "--step",
        type=float,
        default=0.01,
        help="Increment between candidates (default: 0.01)",
    )
    root_parser.add_argument(
        "--strategy",
        choices=[s.value for s in SearchStrategy],
        default=SearchStrategy.SWEEP.value,
        help="Search strategy (default: sweep)",
    )
    root_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )

    # derivative command
    derivative_parser = subparsers.add_parser(
        "derivative",
        help="Central-difference velocity of a symbolic position vector",
    )
    derivative_parser.add_argument("--x", required=True, help="x component expression")
    derivative_parser.add_argument("--y", required=True, help="y component expression")
    derivative_parser.add_argument("--z", required=True, help="z component expression")
    derivative_parser.add_argument(
        "--time",
        type=float,
        required=True,
        help="Time at which to estimate the velocity",
    )
    derivative_parser.add_argument(
        "--interval",
        type=float,
        required=True,
        help="Sampling interval dt",
    )
    derivative_parser.add_argument(
        "--variable",
        default="t",
        help="Time variable name (default: t)",
    )
    derivative_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )

    # gravity command
    gravity_parser = subparsers.add_parser(
        "gravity",
        help="Gravitational acceleration at a planet's surface",
    )
    gravity_parser.add_argument(
        "--mass",
        type=float,
        default=EARTH_MASS_KG,
        help="Planet mass in kg (default: Earth)",
    )
    gravity_parser.add_argument(
        "--radius",
        type=float,
        default=EARTH_RADIUS_M,
        help="Planet radius in m (default: Earth)",
    )

    return parser


def _write_output(output_json: str, output: Path | None) -> None:
    """Write JSON to a file, or to stdout when no path is given."""
    if output:
        with open(output, "w") as f:
            f.write(output_json)
        print(f"\nResults saved to {output}", file=sys.stderr)
    else:
        print(output_json)


def cmd_list(args: argparse.Namespace) -> int:
    """List the available worked examples."""
    for example in list_examples():
        print(f"{example.key:<8} {example.summary}")
    return 0


def cmd_example(args: argparse.Namespace) -> int:
    """Run a worked example."""
    try:
        print(f"\nRunning example {args.key}...", file=sys.stderr)
        result = run_example(args.key)

        if args.readable:
            print(format_example(result.model_dump()))
        else:
            _write_output(result.model_dump_json(indent=2), args.output)

        return 0

    except USER_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_root_find(args: argparse.Namespace) -> int:
    """Find the upper limit at which an integral reaches a target."""
    try:
        policy = SearchPolicy(
            lower_bound=args.lower,
            upper_bound=args.upper,
            step=args.step,
            margin=args.margin,
            strategy=args.strategy,
        )
        integrand = symbolic.parse(args.integrand)

        print(f"\nRoot find ({policy.strategy.value})", file=sys.stderr)
        print(f"Integrand: {integrand}", file=sys.stderr)
        print(
            f"Range: [{policy.lower_bound}, {policy.upper_bound}] | "
            f"step {policy.step} | margin {policy.margin}",
            file=sys.stderr,
        )

        result = root_find_parametric(args.target, integrand, policy, variable=args.variable)

        variable = args.variable
        if variable is None:
            variable = next(iter(integrand.free_symbols)).name

        output = RootFindOutput(
            expression=str(integrand),
            variable=variable,
            target=args.target,
            policy=policy,
            converged=result.converged,
            root=result.root,
            evaluations=result.evaluations,
            residual=result.residual,
        )
        _write_output(output.model_dump_json(indent=2), args.output)

        if result.converged:
            print(f"\nSummary: root {result.root:.6g} after {result.evaluations} evaluations",
                  file=sys.stderr)
        else:
            print(f"\nSummary: target not reached after {result.evaluations} evaluations",
                  file=sys.stderr)

        return 0

    except USER_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_derivative(args: argparse.Namespace) -> int:
    """Central-difference velocity of a symbolic position vector."""
    try:
        position = VectorExpr3D.parse(args.x, args.y, args.z)
        velocity = position.finite_central_difference(
            args.time, args.interval, variable=args.variable
        )
        if not np.all(np.isfinite(velocity)):
            raise ValueError(
                f"Velocity is not finite at {args.variable} = {args.time}: "
                f"the position is singular or not real within {args.interval / 2} of it"
            )

        output = DerivativeOutput(
            position=[str(c) for c in position],
            variable=args.variable,
            time=args.time,
            interval=args.interval,
            velocity=[float(c) for c in velocity],
            representation=position.component_representation(),
        )
        _write_output(output.model_dump_json(indent=2), args.output)
        return 0

    except USER_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_gravity(args: argparse.Namespace) -> int:
    """Gravitational acceleration at a planet's surface."""
    try:
        g = gravitational_acceleration_magnitude(args.mass, args.radius)
        output = GravityOutput(
            planet_mass_kg=args.mass,
            planet_radius_m=args.radius,
            surface_gravity_mps2=g,
        )
        print(output.model_dump_json(indent=2))
        return 0

    except USER_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "list": cmd_list,
        "example": cmd_example,
        "root-find": cmd_root_find,
        "derivative": cmd_derivative,
        "gravity": cmd_gravity,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
