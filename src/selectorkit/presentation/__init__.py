"""selectorkit presentation layer: fluent API and pytest plugin."""
