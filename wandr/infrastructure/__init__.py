"""Infrastructure adapters: logging, caching and outbound HTTP."""
