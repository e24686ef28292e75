#!/usr/bin/env python3
"""
API Gateway Method Compiler

Compile the HTTP events of serverless functions into AWS::ApiGateway::Method
resources (plus CORS preflight methods).

Usage:
    python -m apigen.main --input compile.yml [options]

Options:
    --input PATH        Compile input document (YAML or JSON)
    --output PATH       Write the compiled document here (default: stdout)
    --format FORMAT     json or yaml (default: APIGEN_OUTPUT_FORMAT or json)
    --rest-api-id ID    Logical id of the REST API resource
    --verbose           Verbose output
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import config
from .core import compile_methods
from .exceptions import CompilationError
from .loader import parse_compile_input
from .logging_config import setup_logging

logger = logging.getLogger("apigen.main")


def run(
    input_path: Path,
    output_path: Path | None = None,
    output_format: str | None = None,
    compiler_config=None,
) -> str:
    """
    Compile one input document and write (or return) the result.

    Returns:
        The serialized document.
    """
    compiler_config = compiler_config or config
    output_format = output_format or compiler_config.OUTPUT_FORMAT

    if not input_path.exists():
        raise FileNotFoundError(f"Compile input not found: {input_path}")

    with open(input_path, encoding="utf-8") as f:
        compile_input = parse_compile_input(f.read())

    logger.info(f"Loaded {len(compile_input.functions)} function(s) from {input_path}")

    document = compile_methods(
        compile_input.functions,
        compile_input.path_resource_ids,
        compile_input.function_logical_ids,
        config=compiler_config,
    )
    content = document.render(output_format)

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info(f"Generated {output_path}")

    return content


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compile serverless HTTP events into API Gateway methods"
    )
    parser.add_argument("--input", required=True, help="Compile input document (YAML or JSON)")
    parser.add_argument("--output", help="Output path (default: stdout)")
    parser.add_argument("--format", choices=["json", "yaml"], help="Output format")
    parser.add_argument("--rest-api-id", help="Logical id of the REST API resource")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    setup_logging(
        config.LOG_CONFIG_PATH,
        level="DEBUG" if args.verbose else config.LOG_LEVEL,
        log_format=config.LOG_FORMAT,
    )

    # Override with command-line options.
    compiler_config = config
    if args.rest_api_id:
        compiler_config = config.model_copy(update={"REST_API_LOGICAL_ID": args.rest_api_id})

    output_path = Path(args.output) if args.output else None

    try:
        content = run(
            Path(args.input),
            output_path=output_path,
            output_format=args.format,
            compiler_config=compiler_config,
        )
    except (CompilationError, FileNotFoundError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)

    if output_path is None:
        sys.stdout.write(content)


if __name__ == "__main__":
    main()
