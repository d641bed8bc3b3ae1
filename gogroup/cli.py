from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, List, Optional

from .check import CheckResult, check_file
from .classifier import GorootStdlibLookup, ImportClassifier
from .config import Settings, find_settings_file, load_settings, resolve_settings
from .errors import ConfigError, GoGroupUserError
from .version import tool_version

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("GOGROUP_DEBUG") else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gogroup",
        description="Go import grouping check (builtin, third party, internal private, own module)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Settings shared by check/classify
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="settings file (default: nearest gogroup.yaml above the working directory)",
        )
        sp.add_argument(
            "--self-module",
            metavar="PREFIX",
            help="own-module import prefix (overrides selfModule)",
        )
        sp.add_argument(
            "--internal-domain",
            action="append",
            metavar="DOMAIN",
            help="internal-private domain substring, repeatable (overrides internalPrivateDomains)",
        )
        sp.add_argument(
            "--no-auto-module",
            action="store_true",
            help="do not take the own-module prefix from go.mod when none is configured",
        )
        sp.add_argument(
            "--goroot",
            type=Path,
            metavar="DIR",
            help="Go root used for standard library lookups (default: $GOROOT or `go env GOROOT`)",
        )
        sp.add_argument("--verbose", action="store_true", help="debug logging")

    sp_check = sub.add_parser("check", help="check import grouping of Go files")
    sp_check.add_argument("files", nargs="+", type=Path, metavar="FILE")
    sp_check.add_argument("--format", choices=["text", "json"], default="text", help="output format")
    add_common(sp_check)

    sp_classify = sub.add_parser("classify", help="print the category of import paths")
    sp_classify.add_argument("paths", nargs="+", metavar="IMPORT_PATH")
    add_common(sp_classify)

    return p


def _base_settings(ns: argparse.Namespace) -> Settings:
    """Settings from the file plus command line overrides (without go.mod)."""
    if ns.config is not None and not ns.config.is_file():
        raise ConfigError(f"Settings file not found: {ns.config}")
    config_path = ns.config if ns.config is not None else find_settings_file(Path.cwd())
    settings = load_settings(config_path)
    return settings.with_overrides(
        self_module=ns.self_module,
        internal_private_domains=tuple(ns.internal_domain) if ns.internal_domain else None,
    )


def _dumps(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False)


def _cmd_check(ns: argparse.Namespace) -> int:
    settings = _base_settings(ns)
    lookup = GorootStdlibLookup(ns.goroot)
    results: List[CheckResult] = []
    failed: List[dict] = []
    rc = EXIT_OK

    for path in ns.files:
        effective = resolve_settings(settings, path, auto_module=not ns.no_auto_module)
        try:
            result = check_file(path, effective, lookup)
        except GoGroupUserError as e:
            # One unparsable file does not stop the others
            failed.append({"file": str(path), "ok": False, "error": str(e)})
            if ns.format == "text":
                sys.stderr.write(f"error: {e}\n")
            rc = EXIT_ERROR
            continue

        results.append(result)
        if not result.ok:
            if rc == EXIT_OK:
                rc = EXIT_VIOLATIONS
            if ns.format == "text":
                sys.stdout.write(result.violation.format(path) + "\n")

    if ns.format == "json":
        sys.stdout.write(_dumps([r.to_dict() for r in results] + failed) + "\n")
    return rc


def _cmd_classify(ns: argparse.Namespace) -> int:
    settings = resolve_settings(_base_settings(ns), Path.cwd(), auto_module=not ns.no_auto_module)
    classifier = ImportClassifier(settings, GorootStdlibLookup(ns.goroot))
    for path in ns.paths:
        sys.stdout.write(f"{classifier.classify(path).value}\t{path}\n")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        if ns.cmd == "check":
            return _cmd_check(ns)
        if ns.cmd == "classify":
            return _cmd_classify(ns)
    except GoGroupUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return EXIT_ERROR

    return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
