from loguru import logger

from classifiers.polygon_classifier import classify
from utils.conversion import to_polygon
from utils.log_config import configure_logging
from visualization.formatting import format_report, format_relation
from visualization.save_outputs import save_all_outputs

from config import EXAMPLE_PAIRS, get_active_params


def process_pair(name: str, vertices_a, vertices_b, params=None):
    """
    Runs the complete flow for one polygon pair:
      1. Convert the raw vertex lists
      2. Classify (optionally with precondition checks)
      3. Print the report
      4. Save the rendering if enabled

    Returns the Relation, or None if the pair was rejected.
    """
    if params is None:
        params = get_active_params()

    logger.info("Processing pair {}", name)

    try:
        polygon_a = to_polygon(vertices_a)
        polygon_b = to_polygon(vertices_b)
        relation = classify(polygon_a, polygon_b, strict=params["STRICT_VALIDATION"])
    except ValueError as exc:
        # malformed vertex data, or a PolygonPreconditionError in strict mode
        logger.warning("Skipping {}: {}", name, exc)
        return None

    print(f"\n=== {name} ===")
    print(format_report(polygon_a, polygon_b, relation))

    if params["SAVE_VISUALIZATIONS"]:
        path = save_all_outputs(params["OUTPUT_FOLDER"], name, polygon_a, polygon_b, relation)
        logger.info("Saved rendering to {}", path)

    logger.debug("{} -> {}", name, format_relation(relation))
    return relation


def run(pairs=None, params=None):
    """
    Classifies every pair and returns {name: Relation or None}.
    Defaults to EXAMPLE_PAIRS and the active config.
    """
    if pairs is None:
        pairs = EXAMPLE_PAIRS
    if params is None:
        params = get_active_params()

    if not pairs:
        logger.error("No example polygon pairs configured")
        return {}

    results = {}
    for name, (vertices_a, vertices_b) in pairs.items():
        results[name] = process_pair(name, vertices_a, vertices_b, params)

    logger.info("All {} pairs processed", len(results))
    return results


def main():
    """
    Main entry point:
      - Configures logging
      - Classifies every example pair from config
    """
    params = get_active_params()
    configure_logging(params["LOG_LEVEL"])
    run(EXAMPLE_PAIRS, params)


if __name__ == "__main__":
    main()
