"""Game-agnostic runtime helpers: flow machine, event bus and logging pipeline."""
