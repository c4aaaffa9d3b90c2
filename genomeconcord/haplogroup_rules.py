# File: genomeconcord/haplogroup_rules.py
# Location: genomeconcord/genomeconcord/haplogroup_rules.py

"""
Haplogroup rule table loading.

Rule tables are JSON files of the form::

    {"rules": [
        {"haplogroup": "H", "description": "...",
         "markers": [{"position": 7028, "allele": "C", "weight": 1}, ...]},
        ...
    ]}

Rule order is kept as written: the classifier prefers the earlier rule when
two rules score the same. If no path is given, the packaged
'haplogroup_rules.json' is used.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional

from .models import HaplogroupMarker, HaplogroupRule

logger = logging.getLogger(__name__)


def _parse_marker(raw: Any) -> Optional[HaplogroupMarker]:
    if not isinstance(raw, dict):
        return None
    try:
        position = int(raw["position"])
        allele = str(raw["allele"])
        weight = float(raw.get("weight", 1))
    except (KeyError, TypeError, ValueError):
        return None
    if not allele:
        return None
    return HaplogroupMarker(position=position, allele=allele, weight=weight)


def parse_haplogroup_rules(data: Any) -> List[HaplogroupRule]:
    """
    Build HaplogroupRule objects from decoded JSON.

    Malformed rules and markers are skipped with a warning rather than
    failing the whole table.

    Parameters
    ----------
    data : dict or list
        Either ``{"rules": [...]}`` or the bare list of rules.

    Returns
    -------
    List[HaplogroupRule]
        Rules in file order.
    """
    if isinstance(data, dict):
        data = data.get("rules", [])
    if not isinstance(data, list):
        logger.warning("Haplogroup rule table is not a list; using an empty table")
        return []

    rules: List[HaplogroupRule] = []
    for index, raw_rule in enumerate(data):
        if not isinstance(raw_rule, dict) or not raw_rule.get("haplogroup"):
            logger.warning(f"Skipping haplogroup rule #{index}: missing 'haplogroup'")
            continue

        raw_markers = raw_rule.get("markers") or []
        if not isinstance(raw_markers, list):
            logger.warning(
                f"Skipping haplogroup rule {raw_rule['haplogroup']}: 'markers' is not a list"
            )
            continue
        markers = []
        for raw_marker in raw_markers:
            marker = _parse_marker(raw_marker)
            if marker is None:
                logger.warning(
                    f"Skipping malformed marker {raw_marker!r} in rule {raw_rule['haplogroup']}"
                )
                continue
            markers.append(marker)

        rules.append(
            HaplogroupRule(
                label=str(raw_rule["haplogroup"]),
                markers=tuple(markers),
                description=str(raw_rule.get("description") or ""),
            )
        )

    logger.debug(f"Parsed {len(rules)} haplogroup rules")
    return rules


def load_haplogroup_rules(rules_file: Optional[str] = None) -> List[HaplogroupRule]:
    """
    Load a haplogroup rule table from a JSON file.

    Parameters
    ----------
    rules_file : str, optional
        Path to a rule table. If None, defaults to the packaged
        'haplogroup_rules.json'.

    Returns
    -------
    List[HaplogroupRule]
        Parsed rules in file order.

    Raises
    ------
    FileNotFoundError
        If the rule file does not exist.
    ValueError
        If the rule file is not valid JSON.
    """
    if not rules_file:
        rules_file = os.path.join(os.path.dirname(__file__), "haplogroup_rules.json")

    if not os.path.exists(rules_file):
        raise FileNotFoundError(f"Haplogroup rule file '{rules_file}' not found.")

    with open(rules_file, "r", encoding="utf-8") as f:
        try:
            data: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error parsing haplogroup rule JSON: {e}")

    rules = parse_haplogroup_rules(data)
    logger.info(f"Loaded {len(rules)} haplogroup rules from {rules_file}")
    return rules
