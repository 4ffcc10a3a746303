"""Core building blocks: value kinds, schema validation, console and text helpers."""
