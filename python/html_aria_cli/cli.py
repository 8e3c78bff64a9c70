# SPDX-License-Identifier: AGPL-3.0-only OR LicenseRef-Fullbleed-Commercial
"""html-aria CLI entrypoint.

Exit codes: 0 ok, 2 audit gate (or value check) failed, 3 CLI error.
"""
import argparse
import importlib.metadata as metadata
import json
import logging
import sys
from pathlib import Path

from html_aria import (
    ALL_ROLES,
    NO_ROLES,
    VirtualElement,
    get_role,
    get_supported_attributes,
    get_supported_roles,
    is_valid_attribute_value,
)
from html_aria.audit import FAIL_ON_CHOICES, REPORT_SCHEMA, RULE_IDS, audit_file, gate_ok, validate_report
from html_aria.config import Config
from html_aria.watcher import _is_hidden, watch_paths

LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

COMMANDS = ["role", "supported-roles", "supported-attributes", "validate", "audit", "watch", "capabilities"]


def _get_version():
    """Return installed html-aria version, with a dev fallback."""
    try:
        return metadata.version("html-aria")
    except metadata.PackageNotFoundError:
        return "0.0.0-dev"


def _configure_logging(level_name):
    logging.basicConfig(
        level=LOG_LEVELS.get(level_name, logging.INFO),
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _json_default(obj):
    """Best-effort JSON serializer fallback for CLI payload objects."""
    if obj is ALL_ROLES or obj is NO_ROLES:
        return obj.name
    return str(obj)


def _json_dumps(payload, indent=None):
    """JSON serialize payload using CLI defaults."""
    return json.dumps(payload, ensure_ascii=True, indent=indent, default=_json_default)


def _write_json(path, payload, indent=2):
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(_json_dumps(payload, indent=indent), encoding="utf-8")


def _parse_pair(text):
    """Split NAME=VALUE; a bare NAME is an attribute with an empty value."""
    name, sep, value = text.partition("=")
    name = name.strip().lower()
    if not name:
        raise ValueError(f"Invalid attribute {text!r}; expected NAME=VALUE")
    return name, value if sep else ""


def _parse_ancestor(text):
    """Parse TAG[,NAME=VALUE...] into a VirtualElement."""
    tag, *pairs = [part for part in text.split(",")]
    tag = tag.strip().lower()
    if not tag:
        raise ValueError(f"Invalid ancestor {text!r}; expected TAG[,NAME=VALUE...]")
    return VirtualElement(tag_name=tag, attributes=dict(_parse_pair(p) for p in pairs if p.strip()))


def _element_from_args(args):
    attributes = dict(_parse_pair(a) for a in (args.attr or []))
    element = VirtualElement(tag_name=args.tag.strip().lower(), attributes=attributes)
    if args.no_ancestors and args.ancestor:
        raise ValueError("--ancestor and --no-ancestors are mutually exclusive")
    if args.no_ancestors:
        ancestors = []
    elif args.ancestor:
        ancestors = [_parse_ancestor(a) for a in args.ancestor]
    else:
        ancestors = None
    return element, ancestors


def _ancestors_payload(ancestors):
    if ancestors is None:
        return None
    return [a.to_dict() for a in ancestors]


def cmd_role(args):
    element, ancestors = _element_from_args(args)
    role = get_role(element, ancestors=ancestors)
    if args.json:
        payload = {
            "schema": "html_aria.role.v1",
            "ok": True,
            "element": element.to_dict(),
            "ancestors": _ancestors_payload(ancestors),
            "role": role,
        }
        sys.stdout.write(_json_dumps(payload) + "\n")
    else:
        sys.stdout.write(f"{role if role is not None else '(no corresponding role)'}\n")


def cmd_supported_roles(args):
    element, ancestors = _element_from_args(args)
    roles = get_supported_roles(element, ancestors=ancestors)
    if args.json:
        payload = {
            "schema": "html_aria.supported_roles.v1",
            "ok": True,
            "element": element.to_dict(),
            "ancestors": _ancestors_payload(ancestors),
            "roles": roles if roles is ALL_ROLES or roles is NO_ROLES else list(roles),
        }
        sys.stdout.write(_json_dumps(payload) + "\n")
    elif roles is ALL_ROLES or roles is NO_ROLES:
        sys.stdout.write(f"{roles.name}\n")
    else:
        for role in roles:
            sys.stdout.write(f"{role}\n")


def cmd_supported_attributes(args):
    element, ancestors = _element_from_args(args)
    attributes = get_supported_attributes(element, ancestors=ancestors)
    if args.json:
        payload = {
            "schema": "html_aria.supported_attributes.v1",
            "ok": True,
            "element": element.to_dict(),
            "ancestors": _ancestors_payload(ancestors),
            "attributes": list(attributes),
        }
        sys.stdout.write(_json_dumps(payload) + "\n")
    else:
        for attribute in attributes:
            sys.stdout.write(f"{attribute}\n")


def cmd_validate(args):
    valid = is_valid_attribute_value(args.attribute, args.value)
    if args.json:
        payload = {
            "schema": "html_aria.validate.v1",
            "ok": valid,
            "attribute": args.attribute,
            "value": args.value,
            "valid": valid,
        }
        sys.stdout.write(_json_dumps(payload) + "\n")
    else:
        status = "ok" if valid else "invalid"
        sys.stdout.write(f"[{status}] {args.attribute}={args.value!r}\n")
    if not valid:
        raise SystemExit(2)


def _collect_files(paths, include):
    """Expand directories with the include patterns; explicit files are kept as given."""
    files = []
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            found = set()
            for pattern in include:
                for match in p.rglob(pattern):
                    if match.is_file() and not _is_hidden(match.relative_to(p)):
                        found.add(match)
            files.extend(sorted(found))
        elif p.is_file():
            files.append(p)
        else:
            raise FileNotFoundError(f"No such file or directory: {p}")
    return files


def _audit_options(args, config):
    ignore = sorted(set(config.get_ignore_rules()) | set(args.ignore or []))
    unknown = [r for r in ignore if r not in RULE_IDS]
    if unknown:
        raise ValueError(f"Unknown rule id(s): {', '.join(unknown)}")
    fail_on = args.fail_on or config.get_fail_on()
    return ignore, fail_on


def _print_report(report):
    for f in report["findings"]:
        el = f["element"]
        sys.stdout.write(
            f"{report['source']}:{el['line']}:{el['column']}: {f['verdict']} {f['rule_id']} {f['message']}\n"
        )


def cmd_audit(args):
    config = args.config_obj
    ignore, fail_on = _audit_options(args, config)
    files = _collect_files(args.paths, config.get_include_patterns())
    reports = [audit_file(path, ignore_rules=ignore) for path in files]
    if args.validate_schema:
        for report in reports:
            validate_report(report)

    ok = all(gate_ok(report, fail_on) for report in reports)
    payload = {
        "schema": "html_aria.audit_run.v1",
        "ok": ok,
        "fail_on": fail_on,
        "ignore": ignore,
        "file_count": len(reports),
        "finding_count": sum(r["finding_count"] for r in reports),
        "reports": reports,
    }
    if args.out:
        _write_json(args.out, payload, indent=config.get_indent())
    if args.json:
        sys.stdout.write(_json_dumps(payload) + "\n")
    else:
        for report in reports:
            _print_report(report)
        status = "ok" if ok else "fail"
        sys.stdout.write(
            f"[{status}] {payload['file_count']} file(s), {payload['finding_count']} finding(s) (fail_on={fail_on})\n"
        )
    if not ok:
        raise SystemExit(2)


def cmd_watch(args):
    """Audit the given paths once, then re-audit changed files until interrupted."""
    config = args.config_obj
    ignore, fail_on = _audit_options(args, config)

    def emit(report):
        if args.json:
            sys.stdout.write(_json_dumps(report) + "\n")
        else:
            _print_report(report)
            status = "ok" if gate_ok(report, fail_on) else "fail"
            sys.stdout.write(f"[{status}] {report['source']}: {report['finding_count']} finding(s)\n")
        sys.stdout.flush()

    for path in _collect_files(args.paths, config.get_include_patterns()):
        emit(audit_file(path, ignore_rules=ignore))

    if not args.json:
        sys.stdout.write(f"[watch] Watching {', '.join(args.paths)} for changes...\n")
        sys.stdout.flush()
    watch_paths(
        args.paths,
        emit,
        delay=args.delay,
        include=config.get_include_patterns(),
        ignore_rules=ignore,
    )


def cmd_capabilities(args):
    """CLI handler for machine-readable capability inspection."""
    payload = {
        "schema": "html_aria.capabilities.v1",
        "version": _get_version(),
        "commands": COMMANDS,
        "agent_flags": ["--json", "--config", "--log-level"],
        "audit": {
            "report_schema": REPORT_SCHEMA,
            "rules": list(RULE_IDS),
            "fail_on": list(FAIL_ON_CHOICES),
        },
    }
    if args.json:
        sys.stdout.write(json.dumps(payload, ensure_ascii=True) + "\n")
    else:
        for key, value in payload.items():
            sys.stdout.write(f"{key}: {value}\n")


def _add_element_flags(p):
    p.add_argument("tag", help="Element tag name")
    p.add_argument("--attr", action="append", metavar="NAME=VALUE", help="Element attribute (repeatable)")
    p.add_argument(
        "--ancestor",
        action="append",
        metavar="TAG[,NAME=VALUE...]",
        help="Ancestor element, nearest first (repeatable)",
    )
    p.add_argument("--no-ancestors", action="store_true", help="Element is known to have no ancestors")


def _add_audit_flags(p):
    p.add_argument("paths", nargs="+", help="HTML files or directories")
    p.add_argument("--ignore", action="append", metavar="RULE", help="Drop findings with this rule id (repeatable)")
    p.add_argument("--fail-on", choices=FAIL_ON_CHOICES, default=None)


def _build_parser():
    """Construct and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="html-aria")
    parser.add_argument("--config")
    parser.add_argument("--log-level", choices=list(LOG_LEVELS), default="warn")
    parser.add_argument("--version", action="version", version="html-aria " + _get_version())
    parser.add_argument("--json", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p_role = sub.add_parser("role", help="Resolve the ARIA role of an element")
    _add_element_flags(p_role)
    p_role.set_defaults(func=cmd_role)

    p_roles = sub.add_parser("supported-roles", help="List the roles an element may declare")
    _add_element_flags(p_roles)
    p_roles.set_defaults(func=cmd_supported_roles)

    p_attrs = sub.add_parser("supported-attributes", help="List the aria-* attributes an element supports")
    _add_element_flags(p_attrs)
    p_attrs.set_defaults(func=cmd_supported_attributes)

    p_validate = sub.add_parser("validate", help="Check an aria-* attribute value")
    p_validate.add_argument("attribute")
    p_validate.add_argument("value")
    p_validate.set_defaults(func=cmd_validate)

    p_audit = sub.add_parser("audit", help="Audit HTML documents for ARIA misuse")
    _add_audit_flags(p_audit)
    p_audit.add_argument("--validate-schema", action="store_true")
    p_audit.add_argument("--out", help="Write the JSON report to this path")
    p_audit.set_defaults(func=cmd_audit)

    p_watch = sub.add_parser("watch", help="Re-audit HTML files when they change")
    _add_audit_flags(p_watch)
    p_watch.add_argument("--delay", type=float, default=0.5, help="Debounce interval in seconds")
    p_watch.set_defaults(func=cmd_watch)

    p_cap = sub.add_parser("capabilities", help="Machine-readable CLI capability map")
    p_cap.set_defaults(func=cmd_capabilities)

    return parser


def main(argv=None):
    """Execute CLI command dispatch and standardized error handling."""
    argv = list(sys.argv[1:] if argv is None else argv)
    force_json = "--json" in argv
    if force_json:
        argv = [a for a in argv if a != "--json"]
    parser = _build_parser()
    args = parser.parse_args(argv)
    if force_json:
        args.json = True
    _configure_logging(args.log_level)
    try:
        args.config_obj = Config.load(Path(args.config) if args.config else None)
        if args.config_obj.get_json_output():
            args.json = True
        args.func(args)
    except Exception as exc:
        if args.json:
            err = {
                "schema": "html_aria.error.v1",
                "ok": False,
                "code": "CLI_ERROR",
                "message": str(exc),
            }
            sys.stdout.write(json.dumps(err, ensure_ascii=True) + "\n")
        else:
            sys.stderr.write(f"[error] {exc}\n")
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
