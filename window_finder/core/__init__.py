"""Window lookup engine and the path/URI primitives it relies on."""
