# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Typegen Command Line Interface

Renders descriptors from the shell:

    typegen render tensor 3 --rank 2            # _3: Tensor<B, 2>
    typegen render scalar y --kind float64      # y: f64
    typegen render shape s --rank 3             # s: [usize; 3]
    typegen render other w --expr "Vec<u8>"     # w: Vec<u8>
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from .config import GeneratorConfig
from .errors import TypegenError, ValidationError
from .observability import Verbosity, get_logger

_ELEMENT_KINDS = ("float", "int", "bool")
_SCALAR_KINDS = ("int32", "int64", "float32", "float64", "bool")


def _parse_shape(text: str) -> list[int]:
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError as err:
        raise argparse.ArgumentTypeError(
            f"invalid shape {text!r}, expected comma separated sizes"
        ) from err


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="typegen",
        description="Typegen - type expressions for generated model code",
    )

    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Show version information",
    )

    parser.add_argument(
        "--info",
        action="store_true",
        help="Show system information",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a descriptor to its type expression",
    )
    render_parser.add_argument(
        "--backend",
        default=None,
        help="Backend placeholder token (default: $TYPEGEN_BACKEND or B)",
    )
    render_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object instead of 'name: type'",
    )
    render_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    kinds = render_parser.add_subparsers(dest="descriptor", required=True)

    tensor_parser = kinds.add_parser("tensor", help="Tensor descriptor")
    tensor_parser.add_argument("name")
    tensor_parser.add_argument("--rank", type=int, required=True)
    tensor_parser.add_argument("--kind", choices=_ELEMENT_KINDS, default=None)
    tensor_parser.add_argument(
        "--dtype",
        default=None,
        help="numpy dtype to derive the element kind from (e.g. int64)",
    )
    tensor_parser.add_argument("--shape", type=_parse_shape, default=None)

    scalar_parser = kinds.add_parser("scalar", help="Scalar descriptor")
    scalar_parser.add_argument("name")
    scalar_parser.add_argument("--kind", choices=_SCALAR_KINDS, default=None)
    scalar_parser.add_argument("--dtype", default=None)

    shape_parser = kinds.add_parser("shape", help="Shape descriptor")
    shape_parser.add_argument("name")
    shape_parser.add_argument("--rank", type=int, required=True)

    other_parser = kinds.add_parser("other", help="Verbatim type expression")
    other_parser.add_argument("name")
    other_parser.add_argument("--expr", required=True)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for typegen CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from typegen import __version__

        print(f"typegen v{__version__}")
        return 0

    if args.info:
        _show_info()
        return 0

    if args.command == "render":
        return _run_render(args)

    # Default: show help
    parser.print_help()
    return 0


def _build_descriptor(args):
    from .core import (
        ElementKind,
        ScalarKind,
        element_kind_for,
        make_other,
        make_scalar,
        make_shape,
        make_tensor,
        scalar_kind_for,
    )

    if args.descriptor == "tensor":
        if args.dtype is not None:
            kind = element_kind_for(args.dtype)
        else:
            kind = ElementKind[(args.kind or "float").capitalize()]
        return make_tensor(args.name, args.rank, kind, args.shape)

    if args.descriptor == "scalar":
        if args.dtype is not None:
            kind = scalar_kind_for(args.dtype)
        elif args.kind is not None:
            kind = ScalarKind[args.kind.capitalize()]
        else:
            raise ValidationError(
                "scalar needs --kind or --dtype",
                parameter="kind",
                expected=", ".join(_SCALAR_KINDS),
            )
        return make_scalar(args.name, kind)

    if args.descriptor == "shape":
        return make_shape(args.name, args.rank)

    return make_other(args.name, args.expr)


def _run_render(args) -> int:
    """Render one descriptor and print it."""
    from .core import render, type_name

    logger = get_logger()

    try:
        config = GeneratorConfig.from_env()
        if args.backend is not None:
            config = GeneratorConfig(backend=args.backend, verbosity=config.verbosity)
        logger.set_verbosity(Verbosity.DEBUG if args.debug else config.verbosity)
        descriptor = _build_descriptor(args)
    except TypegenError as e:
        logger.error(e.message, component="cli", descriptor=args.descriptor)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    name = type_name(descriptor)
    expression = render(descriptor, config)
    logger.debug(
        "Rendered type expression",
        component="cli",
        descriptor=descriptor.type_kind.name.lower(),
        name=str(name),
        tokens=len(expression),
    )

    if args.json:
        print(
            json.dumps(
                {
                    "kind": descriptor.type_kind.name,
                    "name": str(name),
                    "type": str(expression),
                    "tokens": list(expression.tokens),
                }
            )
        )
    else:
        print(f"{name}: {expression}")
    return 0


def _show_info():
    """Show system and typegen information."""
    import platform

    import numpy as np

    from typegen import __version__
    from .config import default_config

    print("=" * 50)
    print("Typegen System Information")
    print("=" * 50)
    print(f"Typegen Version: {__version__}")
    print(f"Python Version: {platform.python_version()}")
    print(f"Platform: {platform.platform()}")
    print(f"NumPy Version: {np.__version__}")
    print(f"Backend Token: {default_config().backend}")
    print("=" * 50)


if __name__ == "__main__":
    sys.exit(main())
