"""Build a Vector4 from command line values and print it."""

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import VectypesConfig
from .constants import ElementType
from .core import ELEMENT_TYPES, Vector2, Vector3, Vector4

logger = logging.getLogger(__name__)

# Smaller vectors are widened into a Vector4
_SOURCE_TYPES = {2: Vector2, 3: Vector3, 4: Vector4}


def build_vector(values: list[str], element_type: ElementType) -> Vector4:
    """Validate ``values`` as ``element_type`` and widen them to a Vector4."""
    element = ELEMENT_TYPES[element_type]
    source_type = _SOURCE_TYPES.get(len(values))
    if source_type is None:
        raise ValueError(f"Expected 2 to 4 values, got {len(values)}")

    source = source_type[element](*values)  # type: ignore[index]
    logger.debug(f"Parsed {source!r}")
    return Vector4[element](source)  # type: ignore[valid-type]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Format a four-component vector")
    parser.add_argument("values", nargs="+", help="2 to 4 component values")
    parser.add_argument("--config", type=str, help="Path to config.yaml")
    parser.add_argument(
        "--type",
        dest="element_type",
        choices=[e.value for e in ElementType],
        help="Element type (overrides config)",
    )
    parser.add_argument(
        "--msgpack", action="store_true", help="Print the msgpack encoding as hex"
    )
    args = parser.parse_args(argv)

    config = VectypesConfig.from_yaml(args.config)

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    element_type = ElementType(args.element_type) if args.element_type else config.element_type
    logger.debug(f"Using element type {element_type.value}")

    try:
        vector = build_vector(args.values, element_type)
    except (ValueError, ValidationError) as e:
        logger.error(f"Invalid vector: {e}")
        return 1

    print(vector.to_bytes().hex() if args.msgpack else vector.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
