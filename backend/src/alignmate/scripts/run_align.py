#!/usr/bin/env python3
import argparse
import logging
import sys

from alignmate.core.align_code import align_code
from alignmate.utils.constants import DEFAULT_LANGUAGE
from alignmate.utils.settings import get_settings
from alignmate.utils.utils import read_code, write_code


def align_file(
    input_file: str | None = None,
    code: str | None = None,
    output_file: str | None = None,
    do_align_assignments: bool | None = None,
    do_align_declarations: bool | None = None,
    language: str | None = None,
    verbose: bool = False,
) -> str:
    """
    Vertically align a source file or code string and return the aligned code.

    Args:
        input_file: Path to the source file to align. If None, the code parameter must be provided.
        code: Source code string to align. If None, the input_file parameter must be provided.
        output_file: Path to write the aligned code. If None, the aligned code is only returned.
        do_align_assignments: Whether to align assignment operators. If None, uses the environment.
        do_align_declarations: Whether to align variable names after types and modifiers.
            If None, uses the environment.
        language: Pygments lexer alias used to find declarations. If None, uses the environment.
        verbose: Whether to show progress updates.

    Returns:
        The aligned code as a string.

    Raises:
        ValueError: If neither input_file nor code is provided.
        FileNotFoundError: If the input file is not found.
    """
    if code is None:
        if input_file is None:
            raise ValueError("Either input_file or code must be provided.")
        code = read_code(input_file)

    settings = get_settings(
        {
            "do_align_assignments": do_align_assignments,
            "do_align_declarations": do_align_declarations,
            "language": language,
        }
    )
    if verbose:
        print(f"Aligning code as {settings.language}...", file=sys.stderr)

    aligned_code = align_code(code, settings=settings)

    if output_file:
        write_code(output_file, aligned_code)
        if verbose:
            print(f"Aligned code written to {output_file}", file=sys.stderr)

    return aligned_code


def main():
    """Run the vertical alignment from the command line."""
    parser = argparse.ArgumentParser(
        description="AlignMate - vertical alignment of assignments and declarations"
    )

    parser.add_argument(
        "-i",
        "--input-file",
        required=True,
        help="Path to the source file to align. Use '-' to read from stdin.",
    )

    parser.add_argument(
        "-o",
        "--output-file",
        help="Path to write the aligned code. If not provided, will print to stdout.",
    )

    parser.add_argument(
        "--no-assignments",
        action="store_false",
        default=None,
        dest="do_align_assignments",
        help="Don't align assignment operators.",
    )

    parser.add_argument(
        "--no-declarations",
        action="store_false",
        default=None,
        dest="do_align_declarations",
        help="Don't align variable names after types and modifiers.",
    )

    parser.add_argument(
        "-l",
        "--language",
        default=None,
        help=f"Pygments lexer alias used to find declarations. Default: {DEFAULT_LANGUAGE}",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show progress updates and debug logs.",
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # Handle stdin input
    code = None
    input_file = args.input_file
    if args.input_file == "-":
        code = sys.stdin.read()
        input_file = None

    try:
        aligned_code = align_file(
            input_file=input_file,
            code=code,
            output_file=args.output_file,
            do_align_assignments=args.do_align_assignments,
            do_align_declarations=args.do_align_declarations,
            language=args.language,
            verbose=args.verbose,
        )

        # If no output file was specified, print to stdout
        if not args.output_file:
            sys.stdout.write(aligned_code)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
