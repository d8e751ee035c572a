#!/usr/bin/env python3
"""Verify the bundled ai-init templates before publishing.

Every template must contain the required paths listed in the scaffold layout
and none of the forbidden dependency manifests.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml

TEMPLATES_REL = Path("src/aiinit/templates")
LAYOUT_REL = Path("src/aiinit/resources/scaffold.yaml")


def load_layout(root: Path) -> dict:
    return yaml.safe_load((root / LAYOUT_REL).read_text(encoding="utf-8")) or {}


def check_template(template_dir: Path, layout: dict) -> list[str]:
    problems: list[str] = []
    for required in layout.get("required_template_paths", []):
        if not (template_dir / required).exists():
            problems.append(f"required path missing: {required}")
    for forbidden in layout.get("forbidden_template_paths", []):
        if (template_dir / forbidden).exists():
            problems.append(f"forbidden file present: {forbidden}")
    canonical = layout.get("canonical_file")
    if canonical and (template_dir / canonical).is_file():
        try:
            yaml.safe_load((template_dir / canonical).read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            problems.append(f"{canonical} is not valid YAML: {exc}")
    return problems


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--json", action="store_true", help="print JSON report")
    parser.add_argument("root", nargs="?", type=Path, default=Path(__file__).resolve().parents[1])
    args = parser.parse_args(argv)

    templates_root = (args.root / TEMPLATES_REL).resolve()
    if not templates_root.is_dir():
        print(f"templates root not found: {templates_root}", file=sys.stderr)
        return 1
    layout = load_layout(args.root)

    reports = []
    for template_dir in sorted(p for p in templates_root.iterdir() if p.is_dir()):
        problems = check_template(template_dir, layout)
        reports.append(
            {
                "template": template_dir.name,
                "status": "ok" if not problems else "error",
                "problems": problems,
            }
        )

    failed = any(report["status"] != "ok" for report in reports)
    if args.json:
        json.dump({"status": "error" if failed else "ok", "templates": reports}, sys.stdout)
        sys.stdout.write("\n")
    else:
        for report in reports:
            marker = "✓" if report["status"] == "ok" else "✗"
            print(f"{marker} {report['template']}")
            for problem in report["problems"]:
                print(f"    {problem}", file=sys.stderr)
        if failed:
            print("Template verification failed", file=sys.stderr)
        else:
            print("Template verification passed")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
