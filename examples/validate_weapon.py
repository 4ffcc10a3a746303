"""Example of validating a record against a schema."""

import logging

from tll import SchemaValidator


def main() -> None:
    """Validate a weapon definition and print what is wrong with it."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    schema = {
        "name": "string",
        "damage": "number",
        "automatic": "bool",
        "sounds": ["string", "table"],
        "clip_size": lambda v: isinstance(v, int) and v > 0,
    }
    weapon = {
        "name": "Crowbar",
        "damage": "25",
        "automatic": False,
        "sounds": ["hit1.wav", "hit2.wav"],
        "clip_size": 0,
    }

    valid, violations = SchemaValidator().validate(schema, weapon, "weapon")
    if valid:
        print("Weapon definition is valid.")
        return

    print(f"Found {len(violations)} invalid field(s):")
    for violation in violations:
        print(f"  - {violation}")


if __name__ == "__main__":
    main()
