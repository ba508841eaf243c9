"""Window placement across multiple displays."""
