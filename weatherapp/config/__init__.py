"""Application configuration: schema, defaults and loader."""
