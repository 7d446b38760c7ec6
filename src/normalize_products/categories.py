"""Product category taxonomy and keyword rules.

Rules are evaluated in order and the first rule with a keyword found in the
title wins, so more specific rules sit above broader ones.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "general"


@dataclass(frozen=True)
class CategoryRule:
    category: str
    keywords: tuple[str, ...] = field(default_factory=tuple)


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("camping-gear", (
        "tent", "tents", "sleeping bag", "sleeping pad", "camping", "camp stove",
        "lantern", "hammock", "headlamp",
    )),
    CategoryRule("hiking", (
        "hiking", "trekking pole", "trail shoe", "hydration pack", "daypack",
    )),
    CategoryRule("kitchen", (
        "air fryer", "blender", "coffee", "espresso", "cookware", "skillet",
        "knife", "knives", "toaster", "kettle", "stand mixer", "pressure cooker",
    )),
    CategoryRule("audio", (
        "headphones", "earbuds", "speaker", "soundbar", "turntable",
    )),
    CategoryRule("electronics", (
        "laptop", "monitor", "keyboard", "mouse", "tablet", "charger", "power bank",
        "webcam", "router", "smartwatch",
    )),
    CategoryRule("fitness", (
        "treadmill", "dumbbell", "dumbbells", "kettlebell", "yoga", "exercise bike",
        "resistance band", "fitness tracker",
    )),
    CategoryRule("pet-supplies", (
        "dog", "cat", "pet", "leash", "litter", "aquarium",
    )),
    CategoryRule("baby", (
        "stroller", "crib", "car seat", "baby monitor", "diaper",
    )),
    CategoryRule("beauty", (
        "hair dryer", "straightener", "skincare", "makeup", "electric razor", "shaver",
    )),
    CategoryRule("tools", (
        "drill", "saw", "wrench", "screwdriver", "tool set", "multimeter",
    )),
    CategoryRule("garden", (
        "lawn mower", "garden", "hose", "leaf blower", "pruner", "trimmer",
    )),
    CategoryRule("home", (
        "vacuum", "air purifier", "humidifier", "mattress", "pillow", "bedding",
    )),
)


def infer_category(
    title: str | None,
    explicit: str | None = None,
    rules: tuple[CategoryRule, ...] | list[CategoryRule] = CATEGORY_RULES,
) -> str:
    """Pick a category for a product.

    An explicit category always wins. Otherwise the title is matched against
    the rule keywords on word boundaries, falling back to DEFAULT_CATEGORY.
    """
    if explicit and str(explicit).strip():
        return str(explicit).strip()

    text = (title or "").lower()
    if not text:
        return DEFAULT_CATEGORY

    for rule in rules:
        for keyword in rule.keywords:
            if _keyword_pattern(keyword).search(text):
                return rule.category
    return DEFAULT_CATEGORY


def _keyword_pattern(keyword: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(keyword.lower())}\b")


def load_category_rules(path: Path | str) -> list[CategoryRule]:
    """Load extra rules from a YAML file of ``rules: [{category, keywords}]``."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    rules = []
    for entry in data.get("rules", []):
        category = str(entry.get("category") or "").strip()
        keywords = tuple(str(k).strip().lower() for k in entry.get("keywords") or [] if str(k).strip())
        if not category or not keywords:
            logger.warning("Ignoring incomplete category rule in %s: %s", path, entry)
            continue
        rules.append(CategoryRule(category, keywords))

    logger.info("Loaded %d category rules from %s", len(rules), path)
    return rules


def build_rules(extra_rules_path: Path | str | None = None) -> tuple[CategoryRule, ...]:
    """Built-in rules, preceded by the rules from an optional YAML file."""
    if not extra_rules_path:
        return CATEGORY_RULES
    return tuple(load_category_rules(extra_rules_path)) + CATEGORY_RULES


def category_label(slug: str) -> str:
    """Human-readable label for a category slug: ``camping-gear`` -> ``Camping Gear``."""
    return " ".join(part.capitalize() for part in slug.replace("_", "-").split("-") if part)


def get_all_categories(rules=CATEGORY_RULES) -> list[dict[str, str]]:
    """Every category in the taxonomy, including the default, in rule order."""
    seen = []
    for rule in rules:
        if rule.category not in seen:
            seen.append(rule.category)
    if DEFAULT_CATEGORY not in seen:
        seen.append(DEFAULT_CATEGORY)
    return [{"slug": slug, "name": category_label(slug)} for slug in seen]
