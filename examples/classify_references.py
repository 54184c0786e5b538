"""Classify a few references against a provider schema file.

Usage: python examples/classify_references.py schema.json aws.instance.tags ...
"""

import sys

import tfpath


def main(argv: list[str]) -> int:
    if len(argv) < 2:
        print(__doc__.strip().splitlines()[-1], file=sys.stderr)
        return 2

    tfpath.configure_logging()
    scope = tfpath.Scope(provider_schema=tfpath.load_provider_schema(argv[0]))
    for path in argv[1:]:
        print(f"{path}: {tfpath.classify_desired_type(scope, path).to_json()}")
    for diagnostic in scope.diagnostics:
        print(f"block without attribute type: {diagnostic.path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
