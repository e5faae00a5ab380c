"""htmlcompose core: composition engine, configuration, utilities."""
