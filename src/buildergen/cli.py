"""buildergen CLI: generate builders from JSON type definitions."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional


def main():
    """Main CLI entry point for buildergen commands."""
    try:
        buildergen_version = get_version("buildergen")
    except PackageNotFoundError:
        buildergen_version = "dev"

    parser = argparse.ArgumentParser(
        prog="buildergen",
        description="buildergen: builder synthesis for named-field record types"
    )
    parser.add_argument("--version", action="version", version=f"buildergen {buildergen_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit debug logging to stderr."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the builder for a type definition",
        parents=[parent_parser]
    )
    generate_parser.add_argument(
        "definition_path",
        type=Path,
        help="Path to type definition JSON"
    )
    generate_parser.add_argument(
        "--target",
        choices=["rust", "python", "json"],
        default="rust",
        help="Output form: rust or python source, or the structured artifact as canonical JSON"
    )
    generate_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write output to this file instead of stdout"
    )
    generate_parser.add_argument(
        "--builder-suffix",
        default=None,
        help="Suffix appended to the type name to name the builder (default: Builder)"
    )
    generate_parser.add_argument(
        "--factory-name",
        default=None,
        help="Name of the factory operation added to the type (default: builder)"
    )

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Check that a type definition can carry a builder",
        parents=[parent_parser]
    )
    check_parser.add_argument(
        "definition_path",
        type=Path,
        help="Path to type definition JSON"
    )
    check_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory for validation.json"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "generate":
        # Lazy import: only import the pipeline when a command runs
        from pydantic import ValidationError

        from .api import generate, render
        from .contracts import GenerationOptions
        from ._internal.canonical_json import canonical_dumps
        from .render.python import RenderError

        overrides = {}
        if args.builder_suffix is not None:
            overrides["builder_suffix"] = args.builder_suffix
        if args.factory_name is not None:
            overrides["factory_name"] = args.factory_name
        try:
            options = GenerationOptions(**overrides)
        except ValidationError as e:
            print(f"Error: invalid naming options: {e}", file=sys.stderr)
            sys.exit(2)

        result = generate(args.definition_path.resolve(), options)
        if not result.ok:
            print(f"Error: {result.diagnostic}", file=sys.stderr)
            sys.exit(1)

        try:
            if args.target == "json":
                content = canonical_dumps(result.artifact.model_dump(mode="json")) + "\n"
            else:
                content = render(result.artifact, args.target)
        except RenderError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        if args.out is None:
            sys.stdout.write(content)
            return

        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(content, encoding="utf-8")
        if not args.quiet:
            print(f"[OK] Generated {result.artifact.builder.name}")
            print(f"  Output: {args.out}")
        return

    if args.command == "check":
        from .api import validate
        from ._internal.canonical_json import canonical_dumps

        result = validate(args.definition_path.resolve())
        _write_validation_result(result, args.output_dir, args.quiet, canonical_dumps)
        return


def _write_validation_result(result, output_dir: Optional[Path], quiet: bool, dumps) -> None:
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        report_out = output_dir / "validation.json"
        report_out.write_text(dumps(result.model_dump(mode="json")) + "\n", encoding="utf-8")
    status = "OK" if result.ok else "FAILED"
    if not quiet:
        print(f"[{status}] Check complete")
        if output_dir is not None:
            print(f"  Report: {report_out}")
        print(f"  Status: {status}")
        print(f"  Errors: {len(result.errors)}")
        print(f"  Warnings: {len(result.warnings)}")
        for issue in result.errors + result.warnings:
            print(f"  {issue}")
    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
