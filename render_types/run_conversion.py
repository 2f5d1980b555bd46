"""Orchestration logic for converting TypeDoc JSON to render types."""

import argparse
import logging
import sys
from typing import Any

from render_types.build_link_targets import build_link_targets
from render_types.contract_violation import ContractViolationError
from render_types.iter_documented_declarations import iter_documented_declarations
from render_types.link_resolver import LinkResolver
from render_types.load_config import load_config
from render_types.load_typedoc_project import load_typedoc_project
from render_types.render_type_converter import RenderTypeConverter
from render_types.to_json_text import to_json_text

logger = logging.getLogger(__name__)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the conversion pipeline."""
    if not args.typedoc_json.is_file():
        msg = f"TypeDoc JSON not found: {args.typedoc_json}"
        raise SystemExit(msg)

    config = _init_config(args)
    _init_logging(config, verbose=args.verbose)

    project = load_typedoc_project(args.typedoc_json)
    links = config["links"]
    targets = build_link_targets(
        project,
        links["api_root"],
        strip_prefix=links["strip_prefix"],
        anchor_prefix=links["anchor_prefix"],
    )
    logger.info("Indexed %d documented declarations", len(targets))

    converter = RenderTypeConverter(LinkResolver(targets))
    skip = set(config.get("skip") or [])
    only = set(args.only or [])

    out: dict[str, Any] = {}
    for full_name, declaration in iter_documented_declarations(project):
        if full_name in skip or (only and full_name not in only):
            logger.debug("Skipping %s", full_name)
            continue
        try:
            out[full_name] = converter.declaration_to_type(declaration).to_dict()
        except ContractViolationError as e:
            msg = f"Malformed declaration {full_name}: {e}"
            raise SystemExit(msg) from e

    text = to_json_text(out, indent=config["output"]["indent"])
    if args.out_file:
        args.out_file.parent.mkdir(parents=True, exist_ok=True)
        args.out_file.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %d render types to %s", len(out), args.out_file)
    else:
        sys.stdout.write(text + "\n")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the config file and apply command-line overrides."""
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        msg = f"Config file not found: {args.config}"
        raise SystemExit(msg) from e

    if args.api_root is not None:
        config["links"]["api_root"] = args.api_root
    if args.strip_prefix is not None:
        config["links"]["strip_prefix"] = args.strip_prefix
    return config


def _init_logging(config: dict[str, Any], *, verbose: bool) -> None:
    level = "DEBUG" if verbose else str(config["logging"]["level"]).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
