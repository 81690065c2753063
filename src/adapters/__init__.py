"""Adapters: document shapes, the JSON codec, local files and the collection store."""
