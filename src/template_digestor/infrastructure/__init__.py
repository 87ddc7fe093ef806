"""Infrastructure adapters: parsing, hashing, caching, finders, inflection."""
