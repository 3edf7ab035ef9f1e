#!/usr/bin/env python3
"""Custom Garage - blueprint name → placement plan."""

import argparse
import json
import logging
import sys

from garage.modules.m3_placement import PlacementPlan
from garage.pipeline import Pipeline, PipelineConfig
from garage.shared.errors import BlueprintError


def _args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Load a garage blueprint and compute its placement plan",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python main.py my_garage --blueprints-dir ~/Zeepkist/Blueprints\n"
            "  python main.py my_garage.zeeplevel --no-custom-cameras --json\n"
        ),
    )
    p.add_argument("name", help="blueprint file name, with or without extension")
    p.add_argument("--blueprints-dir", default=None,
                   help="directory searched recursively (default: $GARAGE_BLUEPRINTS_DIR or ./Blueprints)")
    p.add_argument("--no-custom-cameras", dest="custom_cameras", action="store_false", default=True)
    p.add_argument("--hide-anchor", action="store_true")
    p.add_argument("--show-markers", action="store_true")
    p.add_argument("--strict", action="store_true", help="reject unparsable numeric fields")
    p.add_argument("--catalog-size", type=int, default=None)
    p.add_argument("--json", action="store_true", help="print the plan as JSON")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def plan_summary(plan: PlacementPlan) -> dict:
    t = plan.transform
    return {
        "transform": {
            "uniform_scale": t.uniform_scale,
            "yaw_correction_degrees": t.yaw_correction_degrees,
            "translation": list(t.translation),
        },
        "anchor": list(plan.anchor_pose().position),
        "blocks": len(plan.all_blocks()),
        "ordinary": len(plan.ordinary_blocks),
        "cameras": len(plan.camera_blocks),
        "markers": {kind.name.lower(): list(plan.marker_pose(kind).position) for kind in plan.markers},
        "hidden": len(plan.hidden_blocks),
        "skybox": plan.skybox,
        "viewpoints": [
            {
                "position": list(v.position),
                "rotation": list(v.rotation),
                "field_of_view": v.field_of_view,
                "orthographic": v.is_orthographic,
            }
            for v in plan.viewpoints
        ],
    }


def main(argv=None) -> int:
    args = _args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s  %(levelname)-8s  %(message)s", datefmt="%H:%M:%S")
    config = PipelineConfig(
        blueprint_name=args.name,
        use_custom_cameras=args.custom_cameras,
        anchor_visible=not args.hide_anchor,
        markers_visible=args.show_markers,
        strict_numbers=args.strict,
        catalog_size=args.catalog_size,
    )
    if args.blueprints_dir:
        config.blueprints_dir = args.blueprints_dir

    try:
        plan = Pipeline(config).run()
    except (OSError, BlueprintError):
        return 1

    summary = plan_summary(plan)
    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        t = summary["transform"]
        print(f"\nscale   → {t['uniform_scale']:.5f}")
        print(f"yaw     → {t['yaw_correction_degrees']:+.2f}°")
        print(f"anchor  → {summary['anchor']}")
        print(f"blocks  : {summary['blocks']} ({summary['cameras']} cameras, {len(summary['markers'])} markers)")
        print(f"views   : {len(summary['viewpoints'])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
