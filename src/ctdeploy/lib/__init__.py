"""Library layer: configuration, toolchain wrappers, artifact inspection."""
