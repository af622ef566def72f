"""
example.py - a short tour of pack-schema.

Run with ``python example.py``.  Set ``PACK_SCHEMA_VALIDATION=off`` to see
the validating pass-through turn into a no-op.
"""
from __future__ import annotations

import logging

from pack_schema import (
    ValidationError,
    build_with_defaults,
    conforms_exact,
    conforms_permissive,
    explain,
    to_markdown_report,
    validate,
    with_defaults,
)
from pack_schema.predicates import is_number, is_one_of, is_positive_number, is_string

# --------------------------------------------------------------------------- #
# Logging Configuration                                                       #
# --------------------------------------------------------------------------- #
logging.basicConfig(
    level="INFO",
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger("pack_schema.examples")

# --------------------------------------------------------------------------- #
# Step 1: Define packs                                                        #
# --------------------------------------------------------------------------- #
PET = {
    "kind": is_one_of(["cat", "dog"]),
    "toy": {
        "age":  is_positive_number,
        "name": is_string,
    },
}

PREFS, PREF_DEFAULTS = build_with_defaults(
    {
        "age":   [is_number, 0],
        "color": [is_one_of(["red", "blue"]), "blue"],
    },
    name="PREFS",
)

# --------------------------------------------------------------------------- #
# Step 2: Boolean checks                                                      #
# --------------------------------------------------------------------------- #
pet = {"kind": "dog", "toy": {"age": 2, "name": "ball"}, "owner": "sam"}
log.info("permissive: %s", conforms_permissive(PET, pet))
log.info("exact:      %s", conforms_exact(PET, pet))

# --------------------------------------------------------------------------- #
# Step 3: Explain a failure                                                   #
# --------------------------------------------------------------------------- #
broken = {"kind": "cow", "toy": {"age": -1, "name": "ball", "squeaks": True}}
log.info("explanation: %s", explain(PET, broken))
print(to_markdown_report(explain(PET, broken)))

# --------------------------------------------------------------------------- #
# Step 4: Defaults + validating pass-through                                  #
# --------------------------------------------------------------------------- #
prefs = validate(with_defaults({"age": 30}, PREF_DEFAULTS), schema=PREFS, exact=True)
log.info("prefs: %s", prefs)

try:
    validate(broken, schema=PET)
except ValidationError as exc:
    log.warning("rejected:\n%s", exc)
