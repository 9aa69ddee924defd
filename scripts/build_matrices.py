#!/usr/bin/env python3
"""
Uniform Matrix Builder

This script reads a scene description (model transform, camera and
projection) from a YAML file and writes the resulting model, view,
projection and model-view-projection matrices as JSON. Every matrix is
passed through ``flatten`` so it can be uploaded to a column-major
rendering API without further conversion.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import yaml

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from glmath import (
    flatten, inverse, look_at, mat4, mult, ortho, perspective, rotate, scale, translate, transpose,
)


# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    handlers=[
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger("build_matrices")


def load_config(config_path: Optional[str] = None) -> Dict:
    """Load scene configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    # Default config path
    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError(f"Configuration in {config_path} must be a mapping")

    return config


def build_model_matrix(model_cfg: Optional[Dict]) -> np.ndarray:
    """Build the model matrix from scale, rotations and translation.

    Transforms are applied to a vertex in the order scale, rotations (in
    list order), translation.

    Args:
        model_cfg: The ``model`` section of the configuration

    Returns:
        4x4 row-major model matrix
    """
    model_cfg = model_cfg or {}
    matrix = mat4(1.0)

    if "scale" in model_cfg:
        matrix = scale(matrix, model_cfg["scale"])

    for rotation in model_cfg.get("rotate", []):
        matrix = rotate(matrix, rotation["angle"], rotation["axis"])

    if "translate" in model_cfg:
        matrix = translate(matrix, model_cfg["translate"])

    return matrix


def build_view_matrix(camera_cfg: Dict) -> np.ndarray:
    """Build the view matrix from the ``camera`` section."""
    return look_at(
        camera_cfg.get("at", [0.0, 0.0, 0.0]),
        camera_cfg["eye"],
        camera_cfg.get("up", [0.0, 1.0, 0.0]),
    )


def build_projection_matrix(projection_cfg: Dict) -> np.ndarray:
    """Build the projection matrix from the ``projection`` section.

    Args:
        projection_cfg: Projection settings with a ``type`` of
            "perspective" (default) or "ortho"

    Returns:
        4x4 row-major projection matrix
    """
    kind = projection_cfg.get("type", "perspective")
    near = projection_cfg.get("near", 0.1)
    far = projection_cfg.get("far", 100.0)

    if kind == "perspective":
        return perspective(
            projection_cfg.get("fov_y", 45.0),
            projection_cfg.get("aspect", 1.0),
            near,
            far,
        )
    if kind == "ortho":
        return ortho(
            projection_cfg["left"],
            projection_cfg["right"],
            projection_cfg["bottom"],
            projection_cfg["top"],
            near,
            far,
        )
    raise ValueError(f"Unknown projection type: {kind!r}")


def build_uniforms(config: Dict) -> Dict[str, List[float]]:
    """Compute all uniform matrices for a scene configuration.

    Args:
        config: Configuration dictionary with ``model``, ``camera`` and
            ``projection`` sections

    Returns:
        Dictionary of column-major matrices keyed by uniform name
    """
    model = build_model_matrix(config.get("model"))
    view = build_view_matrix(config["camera"])
    projection = build_projection_matrix(config.get("projection", {}))

    model_view = mult(view, model)
    mvp = mult(projection, model_view)

    uniforms = {
        "u_model": model,
        "u_view": view,
        "u_projection": projection,
        "u_mvp": mvp,
    }

    # Normal matrix: inverse transpose of the model-view matrix
    model_view_inv = inverse(model_view)
    if model_view_inv is None:
        logger.warning("Model-view matrix is singular, skipping u_normal")
    else:
        uniforms["u_normal"] = transpose(model_view_inv)

    logger.info(f"Built {len(uniforms)} uniform matrices")
    return {name: flatten(m).tolist() for name, m in uniforms.items()}


def main():
    """Main function to parse arguments and write the uniforms."""
    parser = argparse.ArgumentParser(description="Uniform Matrix Builder")
    parser.add_argument(
        "--config", "-c", dest="config_path", default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--output", "-o", dest="output_path", default=None,
        help="Path to output JSON file (default: stdout)"
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config_path)
        uniforms = build_uniforms(config)
    except Exception as e:
        logger.exception(f"Error building matrices: {e}")
        sys.exit(1)

    text = json.dumps(uniforms, indent=2)
    if args.output_path is None:
        print(text)
    else:
        with open(args.output_path, "w") as f:
            f.write(text + "\n")
        logger.info(f"Saved uniforms to {args.output_path}")


if __name__ == "__main__":
    main()
