"""CatalogPolicy — which models and colors the store inventory carries."""

from __future__ import annotations


def extract_available_models(stores: list[dict]) -> dict:
    """Walk ``store["inventory"][category][model][status][color]``.

    Returns:
        ``{"models": [...], "colors": [...], "modelColors": {model: [...]}}``,
        every list sorted.
    """
    model_colors: dict[str, set[str]] = {}
    colors: set[str] = set()

    for store in stores or []:
        inventory = store.get("inventory")
        if not isinstance(inventory, dict):
            continue
        for category in inventory.values():
            if not isinstance(category, dict):
                continue
            for model, statuses in category.items():
                found = model_colors.setdefault(model, set())
                if not isinstance(statuses, dict):
                    continue
                for by_color in statuses.values():
                    if isinstance(by_color, dict):
                        found.update(by_color)
                        colors.update(by_color)

    return {
        "models": sorted(model_colors),
        "colors": sorted(colors),
        "modelColors": {m: sorted(c) for m, c in sorted(model_colors.items())},
    }
