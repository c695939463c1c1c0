"""Request handling core: command execution, registry, installs, dispatch."""
